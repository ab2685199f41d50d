"""Session and SessionDraft data models."""

from datetime import date as date_type
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class Session(BaseModel):
    """Represents one recorded session of play."""

    id: str = Field(..., min_length=1, description="Unique session identifier")
    date: str = Field(..., description="Local calendar day (YYYY-MM-DD)")
    type: str = Field(default="", description="Game type (e.g., Cash, Tournament)")
    location: str = Field(default="", description="Where the session was played")
    stakes: str = Field(default="", description="Stakes played")
    hours: float = Field(default=0.0, ge=0, description="Session duration in hours")
    buyin: float = Field(default=0.0, description="Money put in")
    cashout: float = Field(default=0.0, description="Money taken out")
    profit: float = Field(default=0.0, description="cashout - buyin, stored at creation")
    notes: str = Field(default="", description="Free-form notes")
    created_at: datetime = Field(
        default_factory=datetime.now,
        alias="createdAt",
        description="Creation timestamp",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_profit(cls, data: Any) -> Any:
        # Records written before profit was stored carry only buyin/cashout.
        if isinstance(data, dict) and data.get("profit") is None:
            data = dict(data)
            try:
                data["profit"] = float(data.get("cashout") or 0) - float(data.get("buyin") or 0)
            except (TypeError, ValueError):
                # buyin/cashout validation reports the bad value
                data.pop("profit", None)
        return data

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_epoch_millis(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value / 1000)
            except (OverflowError, OSError) as e:
                raise ValueError(f"timestamp out of range: {value}") from e
        return value

    def revise(self, **changes: Any) -> "Session":
        """Return a copy with ``changes`` applied and profit recomputed.

        Args:
            **changes: Field values to replace. ``id`` and ``created_at``
                cannot be changed.

        Returns:
            A new validated Session.

        Raises:
            TypeError: If a change names a field Session does not have.
        """
        unknown = sorted(set(changes) - set(Session.model_fields))
        if unknown:
            raise TypeError(f"Unknown session field(s): {', '.join(unknown)}")
        for locked in ("id", "created_at", "profit"):
            changes.pop(locked, None)
        if isinstance(changes.get("date"), date_type):
            changes["date"] = changes["date"].isoformat()
        data = self.model_dump()
        data.update(changes)
        data["profit"] = data["cashout"] - data["buyin"]
        return Session.model_validate(data)


class SessionDraft(BaseModel):
    """User-entered fields of a session that has not been stored yet."""

    date: date_type = Field(default_factory=date_type.today, description="Session date")
    type: str = Field(default="Cash", description="Game type")
    location: str = Field(default="", description="Where the session was played")
    stakes: str = Field(default="", description="Stakes played")
    hours: float = Field(default=0.0, ge=0, description="Session duration in hours")
    buyin: float = Field(default=0.0, description="Money put in")
    cashout: float = Field(default=0.0, description="Money taken out")
    notes: str = Field(default="", description="Free-form notes")

    model_config = {"frozen": True}

    @field_validator("location", "stakes", "notes", mode="after")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @property
    def profit(self) -> float:
        return self.cashout - self.buyin

    def to_session(self, session_id: str, created_at: datetime) -> Session:
        """Assemble a stored Session from this draft.

        Args:
            session_id: Identifier issued by the repository.
            created_at: Creation timestamp issued by the repository.

        Returns:
            The new Session with profit derived from buyin and cashout.
        """
        return Session(
            id=session_id,
            date=self.date.isoformat(),
            type=self.type,
            location=self.location,
            stakes=self.stakes,
            hours=self.hours,
            buyin=self.buyin,
            cashout=self.cashout,
            profit=self.profit,
            notes=self.notes,
            created_at=created_at,
        )
