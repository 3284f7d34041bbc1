"""Option lists for select widgets and display-label substitution."""

from dataclasses import dataclass
from enum import Enum
from typing import Collection, Iterable, List, Optional, Sequence, Type

from html_formgen.forms.labels import labelize


@dataclass(frozen=True)
class Option:
    """One (key, display label) pair."""
    key: str
    label: str


class SelectOptions(List[Option]):
    """Ordered option list registered under a field's external key."""

    @classmethod
    def from_pairs(cls, keys: Sequence[str], labels: Sequence[str]) -> "SelectOptions":
        """
        Build an option list from parallel key and label sequences.

        Raises:
            ValueError: If keys and labels differ in length
        """
        if len(keys) != len(labels):
            raise ValueError(
                f"Option keys and labels differ in length: {len(keys)} keys, {len(labels)} labels"
            )
        return cls(Option(str(k), str(v)) for k, v in zip(keys, labels))

    @classmethod
    def from_enum(cls, enum_type: Type[Enum]) -> "SelectOptions":
        """Derive options from enum members: member value as key, labelized name as label."""
        return cls(Option(str(member.value), labelize(member.name.lower())) for member in enum_type)

    def to_html(self, selected: Collection[str], select_all: bool = False) -> str:
        """
        Render <option> tags.

        Args:
            selected: Keys to mark as selected
            select_all: Mark every option as selected

        Returns:
            One tab-indented <option> line per entry
        """
        lines = []
        for opt in self:
            if select_all or opt.key in selected:
                lines.append(f"\t\t<option value='{opt.key}' selected >{opt.label}</option>\n")
            else:
                lines.append(f"\t\t<option value='{opt.key}'>{opt.label}</option>\n")
        return "".join(lines)

    def display_label(self, key: str) -> Optional[str]:
        """Return the non-empty label registered for key, or None."""
        for opt in self:
            if opt.key == key and opt.label != "":
                return opt.label
        return None

    def substitute(self, keys: Iterable[str]) -> List[str]:
        """Replace each non-empty key by its display label where one exists."""
        return [
            (self.display_label(key) or key) if key != "" else key
            for key in keys
        ]
