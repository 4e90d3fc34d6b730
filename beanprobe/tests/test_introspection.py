from dataclasses import InitVar, dataclass
from typing import Any, ClassVar

from beanprobe import introspection
from beanprobe.tests.conftest import (
    Account,
    Employee,
    Person,
    Session,
    SlotBean,
    Temperature,
)


def member_names(cls: type) -> list[str]:
    return [m.name for m in introspection.members(cls)]


class TestMembers:
    def test_dataclass_fields_skip_classvar(self) -> None:
        assert member_names(Person) == [
            "name",
            "age",
            "email",
            "tags",
            "password",
            "nick",
        ]

    def test_inherited_members_come_first(self) -> None:
        assert member_names(Employee)[:6] == member_names(Person)
        assert member_names(Employee)[6:] == ["employee_id", "manager"]

    def test_slots_are_members(self) -> None:
        infos = introspection.members(SlotBean)

        assert [m.name for m in infos] == ["left", "right", "_hidden"]
        assert infos[2].prop_name == "hidden"
        assert not infos[2].is_public

    def test_markers_and_alias(self) -> None:
        by_name = {m.name: m for m in introspection.members(Person)}

        assert by_name["password"].ignore
        assert by_name["password"].annotation is str
        assert by_name["nick"].alias == "nickname"
        assert by_name["nick"].prop_name == "nickname"

    def test_transient_annotation(self) -> None:
        by_name = {m.name: m for m in introspection.members(Session)}

        assert by_name["audit"].transient
        assert not by_name["token"].transient

    def test_init_var_skipped(self) -> None:
        @dataclass
        class WithInitVar:
            seed: InitVar[int] = 0
            total: int = 0
            LIMIT: ClassVar[int] = 3

        assert member_names(WithInitVar) == ["total"]

    def test_unresolvable_annotation_kept_raw(self) -> None:
        class Dangling:
            known: int
            unknown: "NoSuchType"  # noqa: F821

        annotations = {m.name: m.annotation for m in introspection.members(Dangling)}

        assert annotations == {"known": int, "unknown": "NoSuchType"}

    def test_resolvable_base_survives_broken_subclass(self) -> None:
        class Base:
            count: "int"

        class Broken(Base):
            other: "NoSuchType"  # noqa: F821

        annotations = {m.name: m.annotation for m in introspection.members(Broken)}

        assert annotations == {"count": int, "other": "NoSuchType"}

    def test_redeclared_member_keeps_position(self) -> None:
        class Base:
            first: int
            second: int

        class Child(Base):
            first: str

        infos = introspection.members(Child)
        assert [m.name for m in infos] == ["first", "second"]
        assert infos[0].annotation is str
        assert infos[0].owner is Child


class TestMethods:
    def test_accessor_shaped_methods_only(self) -> None:
        names = [m.name for m in introspection.methods(Account)]

        assert "get_owner" in names
        assert "set_owner" in names
        assert "describe" in names
        assert "close" not in names
        assert "__init__" not in names

    def test_method_signature_details(self) -> None:
        by_name = {m.name: m for m in introspection.methods(Account)}

        assert by_name["get_owner"].param_count == 0
        assert by_name["get_owner"].return_type is str
        assert by_name["set_owner"].param_count == 1
        assert by_name["set_owner"].first_param_type is str

    def test_markers_on_methods(self) -> None:
        by_name = {m.name: m for m in introspection.methods(Session)}

        assert by_name["get_token"].ignore
        assert by_name["get_internal"].transient
        assert not by_name["set_token"].ignore

    def test_override_is_reported_once(self) -> None:
        class Base:
            def get_value(self) -> int:
                return 1

        class Child(Base):
            def get_value(self) -> int:
                return 2

            def get_extra(self) -> str:
                return "x"

        infos = introspection.methods(Child)
        assert [m.name for m in infos] == ["get_value", "get_extra"]
        assert infos[0](Child()) == 2

    def test_static_and_class_methods_skipped(self) -> None:
        class Tools:
            @staticmethod
            def get_static() -> int:
                return 1

            @classmethod
            def get_cls(cls) -> int:
                return 2

        assert introspection.methods(Tools) == []

    def test_unresolvable_return_is_any(self) -> None:
        class Dangling:
            def get_thing(self) -> "NoSuchType":  # noqa: F821
                return None

            def set_thing(self, value: "NoSuchType") -> None:  # noqa: F821
                pass

        by_name = {m.name: m for m in introspection.methods(Dangling)}

        assert by_name["get_thing"].return_type is Any
        assert by_name["set_thing"].first_param_type is None

    def test_unannotated_return_is_any(self) -> None:
        class Loose:
            def get_thing(self):
                return 1

        (info,) = introspection.methods(Loose)
        assert info.return_type is Any


def test_python_properties() -> None:
    infos = {p.name: p for p in introspection.properties(Temperature)}

    assert set(infos) == {"celsius", "fahrenheit"}
    assert infos["celsius"].getter is not None
    assert infos["celsius"].setter is not None
    assert infos["fahrenheit"].setter is None
    assert infos["fahrenheit"].getter.return_type is float


def test_function_hints_tolerates_bad_annotations() -> None:
    def broken(x: "DoesNotExist") -> None:  # noqa: F821
        pass

    assert introspection.function_hints(broken) == {}
