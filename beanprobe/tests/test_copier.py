from dataclasses import dataclass
from typing import Any

import pytest

from beanprobe import exceptions as ex
from beanprobe.copier import BeanCopier, CopyOptions
from beanprobe.providers import MapValueProvider
from beanprobe.tests.conftest import Account, Employee, Fragile, Person


class TestBeanToBean:
    def test_copies_matching_properties(self, person: Person) -> None:
        target = Employee()

        BeanCopier(person, target).copy()

        assert target.name == "Bob"
        assert target.age == 41
        assert target.tags == ["a", "b"]
        assert target.nick == "bobby"
        assert target.employee_id == 0

    def test_ignored_property_not_copied(self, person: Person) -> None:
        target = Person()

        BeanCopier.create(person, target).copy()

        assert target.password == ""

    def test_accessor_bean_to_dataclass(self) -> None:
        @dataclass
        class Holder:
            owner: str = ""
            balance: float = 0.0

        target = Holder()
        BeanCopier(Account("dan", 3.0), target).copy()

        assert (target.owner, target.balance) == ("dan", 3.0)

    def test_editable_limits_properties(self) -> None:
        target = Employee(manager=True)

        source = Employee(name="x", manager=False)
        BeanCopier(source, target, CopyOptions(editable=Person)).copy()

        assert target.name == "x"
        assert target.manager is True

    def test_read_failure_ignored(self) -> None:
        class Sink:
            value: Any = None
            size: int = 0

        target = Sink()
        BeanCopier(Fragile(), target, CopyOptions(ignore_error=True)).copy()

        assert target.size == 2

    def test_read_failure_raised(self) -> None:
        class Sink:
            value: Any = None

        with pytest.raises(ex.BeanAccessError):
            BeanCopier(Fragile(), Sink()).copy()


class TestMapSources:
    def test_map_to_bean_converts_values(self) -> None:
        target = Account()

        BeanCopier({"owner": "eve", "balance": "9.5", "frozen": True}, target).copy()

        assert target.get_owner() == "eve"
        assert target.getBalance() == 9.5
        assert target.is_frozen() is False

    def test_map_keys_in_underline_case(self) -> None:
        target = Employee()

        BeanCopier({"employee_id": "17"}, target).copy()

        assert target.employee_id == 17

    def test_ignore_case(self) -> None:
        target = Person()

        BeanCopier({"NAME": "Ann"}, target, CopyOptions(ignore_case=True)).copy()

        assert target.name == "Ann"

    def test_ignore_null_keeps_existing(self) -> None:
        target = Person(name="keep", email="old@example.com")

        BeanCopier({"name": None, "email": None}, target, CopyOptions(ignore_null=True)).copy()

        assert target.name == "keep"
        assert target.email == "old@example.com"

    def test_null_written_by_default(self) -> None:
        target = Person(email="old@example.com")

        BeanCopier({"email": None}, target).copy()

        assert target.email is None

    def test_missing_property_raises_when_required(self) -> None:
        options = CopyOptions(ignore_missing=False)

        with pytest.raises(ex.PropertyNotFoundError, match="'age'"):
            BeanCopier({"name": "Ann"}, Person(), options).copy()

    def test_missing_property_tolerated_with_ignore_error(self) -> None:
        options = CopyOptions(ignore_missing=False, ignore_error=True)

        target = BeanCopier({"name": "Ann"}, Person(), options).copy()

        assert target.name == "Ann"

    def test_bad_value_with_ignore_error(self) -> None:
        target = Person(age=5)

        BeanCopier({"age": "old", "name": "Ann"}, target, CopyOptions(ignore_error=True)).copy()

        assert target.name == "Ann"
        assert target.age == 5

    def test_value_provider_source(self) -> None:
        provider = MapValueProvider({"user_name": "x"})
        target = Person()

        BeanCopier(provider, target).copy()

        assert target.name == ""


class TestMapTargets:
    def test_bean_to_map(self, person: Person) -> None:
        result = BeanCopier(person, {}).copy()

        assert result == {
            "name": "Bob",
            "age": 41,
            "email": "bob@example.com",
            "tags": ["a", "b"],
            "nickname": "bobby",
        }

    def test_bean_to_map_ignore_null(self) -> None:
        result = BeanCopier(Person(name="a"), {}, CopyOptions(ignore_null=True)).copy()

        assert "email" not in result

    def test_map_to_map(self) -> None:
        target: dict[str, Any] = {"keep": 1}

        BeanCopier({"a": 1, "b": None}, target, CopyOptions(ignore_null=True)).copy()

        assert target == {"keep": 1, "a": 1}

    def test_none_source_rejected(self) -> None:
        with pytest.raises(ValueError):
            BeanCopier(None, {})
