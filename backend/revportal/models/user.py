"""User model — portal staff accounts with role and scope."""

import uuid

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from revportal.database import Base, CreatedAtMixin, TimestampMixin, UUIDPrimaryKeyMixin

ROLES = ("administrator", "editor", "viewer")
SCOPES = ("corporate", "property")


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A staff member. Corporate scope sees every hotel; property scope only assigned ones."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), default="viewer", nullable=False)
    scope: Mapped[str] = mapped_column(String(50), default="property", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    assignments: Mapped[list["UserHotelAssignment"]] = relationship(
        back_populates="user",
        lazy="raise",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(f"role IN {ROLES}", name="ck_users_role"),
        CheckConstraint(f"scope IN {SCOPES}", name="ck_users_scope"),
    )

    @property
    def is_administrator(self) -> bool:
        return self.role == "administrator"

    @property
    def can_edit(self) -> bool:
        return self.role in ("administrator", "editor")

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role!r} scope={self.scope!r}>"


class UserHotelAssignment(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """Grants a property-scope user access to one hotel."""

    __tablename__ = "user_hotel_assignments"

    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship(back_populates="assignments")

    __table_args__ = (UniqueConstraint("user_id", "hotel_id", name="uq_user_hotel_assignments_user_hotel"),)

    def __repr__(self) -> str:
        return f"<UserHotelAssignment(user_id={self.user_id}, hotel_id={self.hotel_id})>"
