from dataclasses import dataclass

import pytest

from cryptkit.opaque import implement


class Foo:
    def __init__(self, secret):
        self.secret = secret


implement(Foo)


def test_debug_formatting():
    assert repr(Foo(42)) == "Foo { ... }"


def test_debug_formatting_generic():
    class FooGeneric:
        def __init__(self, secret, generic):
            self.secret = secret
            self.generic = generic

    implement(FooGeneric, params=["generic"])
    assert repr(FooGeneric(42, ())) == "FooGeneric<tuple> { ... }"


def test_debug_formatting_many_generics():
    class FooManyGenerics:
        def __init__(self, secret, generic1, generic2, generic3):
            self.secret = secret
            self.generic1 = generic1
            self.generic2 = generic2
            self.generic3 = generic3

    implement(FooManyGenerics, params=["generic1", "generic2", "generic3"])
    value = FooManyGenerics(42, (), 0, "hello")
    assert repr(value) == "FooManyGenerics<tuple, int, str> { ... }"


def test_secret_not_in_repr():
    value = Foo("secret")
    assert "secret" not in repr(value)
    assert "secret" not in str(value)


def test_bare_decorator_returns_class():
    class Key:
        def __init__(self):
            self.material = b"\x2a" * 16

    assert implement(Key) is Key
    assert repr(Key()) == "Key { ... }"


def test_overrides_dataclass_repr():
    @dataclass
    class Key:
        material: bytes

    implement(Key)
    assert repr(Key(b"\x2a" * 16)) == "Key { ... }"


def test_non_builtin_param_type_is_qualified():
    class Inner:
        pass

    class Outer:
        def __init__(self):
            self.inner = Inner()

    implement(Outer, params=["inner"])
    text = repr(Outer())
    assert text.startswith("Outer<")
    assert text.endswith("Inner> { ... }")
    assert __name__ in text


def test_params_as_string_rejected():
    with pytest.raises(TypeError):
        implement(Foo, params="generic")


def test_invalid_param_name_rejected():
    with pytest.raises(ValueError):
        implement(params=["not a name"])