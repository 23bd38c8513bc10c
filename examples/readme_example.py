"""Run from the repository root with: python -m examples.readme_example"""

from classdefaults import Defaults

from examples.people import NormalPerson, PokemonTrainer


class Root(Defaults.defaults({"layer": 0, "root": True, "obj": {"foo": "bar"}})):
    pass


class Child(Root):
    def __init__(self) -> None:
        # Defaults are set on the instance before any __init__ runs
        self.layer = 1
        self.child = True


class GrandChild(Child.defaults({"layer": 2, "grandchild": True, "obj": {"biz": "baz"}})):
    pass


class StarShip:
    def fire_photon_torpedoes(self) -> None:
        print("It's a direct hit!")


class Enterprise(Defaults.extends(StarShip).defaults({"captain": "James T. Kirk"})):
    pass


def layered_classes() -> None:
    print(Root())
    # Root(layer=0, root=True, obj={'foo': 'bar'})
    print(Child())
    # Child(layer=1, root=True, obj={'foo': 'bar'}, child=True)
    print(GrandChild())
    # GrandChild(layer=1, root=True, obj={'biz': 'baz'}, grandchild=True, child=True)


def foreign_base_class() -> None:
    enterprise = Enterprise()
    print(f"Captain: {enterprise.captain}")
    enterprise.fire_photon_torpedoes()


def independent_instances() -> None:
    person = NormalPerson()
    trainer1 = PokemonTrainer({"first_name": "Adam", "last_name": "Miller"})
    trainer2 = PokemonTrainer({"first_name": "Trevor", "last_name": "Fayle"})

    print(f"Regular person {person.full_name} is {person.type}")
    print(f"{trainer1.full_name} is {trainer1.type}")

    # Defaults are cloned per instance, so the trainers never share a list
    trainer1.catch("Blaziken")
    print(f"{trainer1.full_name} has {len(trainer1.pokemon)} Pokemon")
    print(f"{trainer2.full_name} has {len(trainer2.pokemon)} Pokemon")


def main() -> None:
    print("Example One:")
    layered_classes()
    print("\nExample Two:")
    foreign_base_class()
    print("\nExample Three:")
    independent_instances()


if __name__ == "__main__":
    main()
