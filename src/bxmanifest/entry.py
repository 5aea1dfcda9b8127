from dataclasses import dataclass, field, asdict
from typing import Optional


@dataclass(frozen=True)
class Entry:
    """One catalog item built from one image file."""
    id: str
    name: str
    short: str
    path: str  # relative to the image root, forward slashes
    system: Optional[str] = None  # blades: "BX", "UX", "CX"
    config: Optional[str] = None  # blades: "integrated" or "standard"
    category: Optional[str] = None  # blades: "canon", "collab", "xover"
    type: Optional[str] = None  # rachets: "standard" or "integrated"
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serializable form; attributes that don't apply to the part are left out."""
        data = asdict(self)
        out = {"id": data["id"], "name": data["name"], "short": data["short"]}
        for key in ("system", "config", "category", "type"):
            if data[key] is not None:
                out[key] = data[key]
        out["path"] = data["path"]
        out["aliases"] = list(data["aliases"])
        return out
