"""Team model."""

from datetime import datetime

from devlog import db


class Team(db.Model):
    """A named group with one manager, joined through its invite code."""

    __tablename__ = "teams"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)

    # Stored upper-case; immutable after creation
    code = db.Column(db.String(20), unique=True, nullable=False, index=True)

    manager_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    manager = db.relationship("User", foreign_keys=[manager_id])

    @property
    def member_count(self) -> int:
        return len(self.members)

    def to_summary_dict(self) -> dict:
        """Minimal representation used by the join picker."""
        return {"id": self.id, "name": self.name, "code": self.code}

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "manager_id": self.manager_id,
            "manager_name": self.manager.full_name if self.manager else None,
            "members_count": self.member_count,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<Team {self.code}: {self.name}>"
