import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime

def _parse_datetime(value):
    """Parse ISO or 'YYYY-MM-DD HH:MM:SS' strings, leaving anything else untouched"""
    if not isinstance(value, str):
        return value
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        try:
            return datetime.strptime(value, "%Y-%m-%d %H:%M:%S")
        except ValueError:
            # Keep as string if parsing fails
            return value

@dataclass(kw_only=True)
class BaseModel:
    """Base model with the key and timestamp columns shared by all rows"""
    product_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)
    update_at: datetime = field(default_factory=datetime.now)

    # Datetime columns parsed by from_dict
    _datetime_fields = ('created_at', 'update_at')

    def to_dict(self) -> dict:
        """Convert model to a row dictionary, keeping None columns"""
        return {
            f.name: self._format_datetime(getattr(self, f.name))
            if isinstance(getattr(self, f.name), datetime) else getattr(self, f.name)
            for f in fields(self)
        }

    def _format_datetime(self, dt: datetime) -> str:
        """Format datetime to ISO format"""
        return dt.isoformat()

    @classmethod
    def from_dict(cls, data: dict) -> 'BaseModel':
        """Create model instance from a row, ignoring columns the model does not know"""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for key in cls._datetime_fields:
            if key in values:
                values[key] = _parse_datetime(values[key])
        return cls(**values)
