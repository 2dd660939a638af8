"""Daily log model."""

from datetime import datetime
from enum import Enum

from devlog import db


class ReviewStatus(str, Enum):
    """Review state of a daily log."""

    PENDING = "pending"
    REVIEWED = "reviewed"


class DailyLog(db.Model):
    """One developer's work log for a calendar day."""

    __tablename__ = "daily_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Calendar day as YYYY-MM-DD; compared as a string, never as a datetime
    date = db.Column(db.String(10), nullable=False, index=True)

    tasks = db.Column(db.Text, nullable=False)
    hours = db.Column(db.Integer, nullable=False)  # 0-24
    minutes = db.Column(db.Integer, nullable=False)  # 0-59
    mood = db.Column(db.Integer, nullable=False)  # 1=very low, 5=great
    blockers = db.Column(db.Text, nullable=True)

    # Review fields are populated together or all absent
    review_status = db.Column(
        db.String(20), default=ReviewStatus.PENDING.value, nullable=False, index=True
    )
    manager_feedback = db.Column(db.Text, nullable=True)
    reviewed_by = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    reviewed_at = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    MOOD_LABELS = {
        1: "Very Low",
        2: "Low",
        3: "Neutral",
        4: "Good",
        5: "Great",
    }

    @property
    def is_reviewed(self) -> bool:
        return self.review_status == ReviewStatus.REVIEWED.value

    @property
    def mood_label(self) -> str:
        """Get mood label."""
        return self.MOOD_LABELS.get(self.mood, "Unknown")

    @property
    def total_hours(self) -> float:
        """Elapsed time as fractional hours."""
        return self.hours + self.minutes / 60

    def mark_reviewed(self, reviewer_id: int, feedback: str) -> None:
        """Finalize the review."""
        self.manager_feedback = feedback
        self.review_status = ReviewStatus.REVIEWED.value
        self.reviewed_by = reviewer_id
        self.reviewed_at = datetime.utcnow()

    def save_feedback(self, feedback: str) -> None:
        """Store feedback without finalizing; the log stays pending."""
        self.manager_feedback = feedback
        self.review_status = ReviewStatus.PENDING.value
        self.reviewed_by = None
        self.reviewed_at = None

    def reset_review(self) -> None:
        """Drop the review so edited content has to be reviewed again."""
        self.review_status = ReviewStatus.PENDING.value
        self.manager_feedback = None
        self.reviewed_by = None
        self.reviewed_at = None

    def to_dict(self, include_user: bool = False) -> dict:
        """Convert daily log to dictionary."""
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date,
            "tasks": self.tasks,
            "hours": self.hours,
            "minutes": self.minutes,
            "mood": self.mood,
            "mood_label": self.mood_label,
            "blockers": self.blockers,
            "review_status": self.review_status,
            "manager_feedback": self.manager_feedback,
            "reviewed_by": self.reviewed_by,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_user:
            data["user"] = self.user.to_dict() if self.user else None
        return data

    def __repr__(self) -> str:
        return f"<DailyLog {self.id}: user={self.user_id}, date={self.date}>"
