"""User model."""

from datetime import datetime
from enum import Enum

from werkzeug.security import check_password_hash, generate_password_hash

from devlog import db


class UserRole(str, Enum):
    """User role enum."""

    DEVELOPER = "developer"
    MANAGER = "manager"


class User(db.Model):
    """User model for storing account and team membership data."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    full_name = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.String(20), nullable=False, default=UserRole.DEVELOPER.value
    )

    # Membership; cleared (never deleted) on leave/removal
    team_id = db.Column(
        db.Integer,
        db.ForeignKey("teams.id", ondelete="SET NULL", use_alter=True),
        nullable=True,
        index=True,
    )

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    team = db.relationship(
        "Team", foreign_keys=[team_id], backref="members", post_update=True
    )
    daily_logs = db.relationship(
        "DailyLog",
        foreign_keys="DailyLog.user_id",
        backref="user",
        lazy="dynamic",
        cascade="all, delete-orphan",
    )
    notifications = db.relationship(
        "Notification", backref="user", lazy="dynamic", cascade="all, delete-orphan"
    )

    def set_password(self, password: str) -> None:
        """Set password hash."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Check password against hash."""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.MANAGER.value

    def shares_team_with(self, other: "User") -> bool:
        """True when both users belong to the same (non-empty) team."""
        return self.team_id is not None and self.team_id == other.team_id

    def to_dict(self) -> dict:
        """Convert user to dictionary."""
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role,
            "team_id": self.team_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<User {self.email}>"
