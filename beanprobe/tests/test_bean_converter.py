import pickle

import pytest

from beanprobe import exceptions as ex
from beanprobe.bean_converter import BeanConverter
from beanprobe.config import settings
from beanprobe.copier import CopyOptions
from beanprobe.dynamic_bean import DynamicBean
from beanprobe.providers import MapValueProvider
from beanprobe.tests.conftest import Employee, Person, Settings, UserView


def test_mapping_to_bean() -> None:
    person = BeanConverter(Person).convert({"name": "a", "age": "2"})

    assert person == Person(name="a", age=2)


def test_bad_values_ignored_by_default() -> None:
    person = BeanConverter(Person).convert({"name": "a", "age": "old"})

    assert person.name == "a"
    assert person.age == 0


def test_strict_copy_options() -> None:
    converter = BeanConverter(Person, CopyOptions(ignore_error=False))

    with pytest.raises(ex.ConversionError):
        converter.convert({"age": "old"})


def test_bean_to_other_bean(person: Person) -> None:
    employee = BeanConverter(Employee).convert(person)

    assert isinstance(employee, Employee)
    assert employee.name == "Bob"


def test_dynamic_bean_unwrapped(person: Person) -> None:
    employee = BeanConverter(Employee).convert(DynamicBean(person))

    assert employee.age == 41


def test_value_provider_source() -> None:
    person = BeanConverter(Person).convert(MapValueProvider({"name": "z"}))

    assert person.name == "z"


def test_mapping_to_interface_is_live_proxy() -> None:
    source = {"age": "3"}
    view = BeanConverter(UserView).convert(source)

    assert view.get_age() == 3
    view.set_age(4)
    assert source["age"] == 4


def test_mapping_to_abstract_class() -> None:
    result = BeanConverter(Settings).convert({"timeout": 1})

    assert isinstance(result, Settings)
    assert result.get_timeout() == 1.0


def test_none_and_unsupported_values() -> None:
    converter = BeanConverter(Person)
    fallback = Person(name="fallback")

    assert converter.convert(None) is None
    assert converter.convert(None, fallback) is fallback
    assert converter.convert(5, fallback) is fallback
    assert converter.target_type is Person


def test_pickled_bytes(person: Person) -> None:
    assert BeanConverter(Person).convert(pickle.dumps(person)) == person


def test_pickle_disabled(monkeypatch: pytest.MonkeyPatch, person: Person) -> None:
    monkeypatch.setattr(settings, "ALLOW_PICKLE", False)

    assert BeanConverter(Person).convert(pickle.dumps(person)) is None


def test_corrupt_bytes() -> None:
    with pytest.raises(ex.BeanAccessError, match="Could not deserialize"):
        BeanConverter(Person).convert(b"not a pickle")


def test_non_class_target_rejected() -> None:
    with pytest.raises(TypeError):
        BeanConverter("Person")
