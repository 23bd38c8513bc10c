"""Example classes demonstrating layered defaults."""

from typing import Any

from classdefaults import Defaults


class Model(Defaults):
    """Example: base class accepting instance-specific data.

    Defaults are already attached when __init__ runs, so `data` overrides them.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        for key, value in (data or {}).items():
            setattr(self, key, value)


class NormalPerson(
    Model.defaults(
        {
            "type": "Boring...",
            "first_name": "Joe",
            "middle_name": "",
            "last_name": "Schmo",
        }
    )
):
    """Example: sensible, boring defaults."""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class PokemonTrainer(NormalPerson, defaults={"type": "Awesome!", "pokemon": []}):
    """Example: a derived layer overriding one default and adding another.

    Each trainer owns a separate `pokemon` list cloned from the declaration.
    """

    @property
    def full_name(self) -> str:
        return f"Pokemon Trainer {self.first_name} {self.last_name}"

    def catch(self, mon: str) -> None:
        print(f"{self.full_name} caught a {mon}!")
        self.pokemon.append(mon)
