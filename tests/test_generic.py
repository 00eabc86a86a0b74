import pytest

from typedgeneric.base import registry as registry_module
from typedgeneric.base.config import ENV_VARIABLE, GenericConfig
from typedgeneric.base.contract import Contract
from typedgeneric.base.errors import (
    GenericDeclarationError,
    TypeMismatchError,
    UnknownMethodError,
    UnsupportedTypeError,
)
from typedgeneric.base.registry import build_signature_map
from typedgeneric.generic import Generic
from typedgeneric.utils.types import type_name


class Recorder(Contract):
    """Template recording every call that reaches it"""

    def __init__(self):
        self.calls = []

    @classmethod
    def generic(cls, *types, **kwargs):
        """Make a new typed recorder

        Arguments:
            key (Any): type of the keys
            value (Any): type of the values
        """
        return Generic(cls, *types, **kwargs)

    def put(self, key, value):
        self.calls.append(("put", key, value))
        return value

    def put_value(self, value):
        self.calls.append(("put_value", value))

    def anything(self, a, b=None):
        self.calls.append(("anything", a, b))
        return a

    def variadic(self, key, *values):
        self.calls.append(("variadic", key) + values)

    def tagged(self, *values, key):
        self.calls.append(("tagged", key) + values)


class Undeclared(Contract):
    @classmethod
    def generic(cls, *types):
        return Generic(cls, *types)

    def put(self, key):
        pass


class Point(object):
    pass


@pytest.fixture
def disabled():
    return GenericConfig(disabled=True)


@pytest.fixture
def recorder():
    return Recorder.generic(str, Point)


class TestConstruction:
    def test_types(self, recorder):
        assert recorder.types == ("string", type_name(Point))
        assert recorder.enabled
        assert recorder.signature.slots == ("key", "value")

    def test_template_forms(self):
        template = Recorder()

        assert Generic(template, str, int).template is template
        assert isinstance(Generic(Recorder, str, int).template, Recorder)
        assert isinstance(
            Generic(lambda: Recorder(), str, int).template, Recorder
        )
        assert isinstance(
            Generic("%s.Recorder" % __name__, str, int).template, Recorder
        )

    def test_factory(self):
        generic = Generic.generic(Recorder, "string", "integer")

        assert type(generic) is Generic
        assert generic.types == ("string", "integer")

    def test_proxy_is_transparent(self, recorder):
        assert isinstance(recorder, Recorder)
        assert isinstance(recorder, Generic)
        assert isinstance(recorder, Contract)

    def test_missing_declaration(self):
        with pytest.raises(GenericDeclarationError):
            Undeclared.generic(str)

    def test_wrong_number_of_types(self):
        with pytest.raises(GenericDeclarationError, match="expects 2 types"):
            Recorder.generic(str)

        with pytest.raises(GenericDeclarationError):
            Recorder.generic(str, int, float)

    def test_unsupported_declaration(self):
        with pytest.raises(UnsupportedTypeError):
            Recorder.generic(b"bytes", int)

    def test_repr(self, recorder):
        assert repr(recorder) == "<%s[string, %s]>" % (
            type_name(Recorder),
            type_name(Point),
        )


class TestInvoke:
    def test_match_forwards(self, recorder):
        p = Point()

        assert recorder.put("a", p) is p
        assert recorder.invoke("put", "b", p) is p
        assert recorder.template.calls == [("put", "a", p), ("put", "b", p)]

    @pytest.mark.parametrize(
        "args",
        [
            (0, Point()),
            ("a", "b"),
            ("a", None),
            (None, Point()),
            (b"bytes", Point()),
        ],
    )
    def test_mismatch_never_forwards(self, recorder, args):
        with pytest.raises(TypeError):
            recorder.put(*args)

        # template method never entered
        assert recorder.template.calls == []

    def test_mismatch_message(self, recorder):
        with pytest.raises(TypeMismatchError) as e:
            recorder.put(0, Point())

        assert str(e.value) == (
            "Expecting string type argument but received integer instead."
        )

    def test_usable_after_mismatch(self, recorder):
        p = Point()

        with pytest.raises(TypeMismatchError):
            recorder.put(0, p)

        recorder.put("a", p)
        assert recorder.template.calls == [("put", "a", p)]

    def test_slot_by_name_not_position(self, recorder):
        # `value` is the first parameter of put_value but the second slot
        recorder.put_value(Point())

        with pytest.raises(TypeMismatchError):
            recorder.put_value("a")

    def test_keyword_arguments(self, recorder):
        p = Point()
        recorder.put(key="a", value=p)

        with pytest.raises(TypeMismatchError):
            recorder.put(value="a", key="b")

        assert recorder.template.calls == [("put", "a", p)]

    def test_unconstrained(self, recorder):
        # no parameter name overlap with the type slots
        for value in (0, "a", None, Point(), [1], b"bytes"):
            assert recorder.anything(value, b=value) is value

    def test_variadic_not_checked(self, recorder):
        recorder.variadic("a", 1, "two", None)

        with pytest.raises(TypeMismatchError):
            recorder.variadic(0, 1)

    def test_keyword_only_by_name(self, recorder):
        # variadic values never map to the keyword-only `key` slot
        recorder.tagged(1, None, key="a")

        with pytest.raises(TypeMismatchError):
            recorder.tagged("a", key=0)

        assert recorder.template.calls == [("tagged", "a", 1, None)]

    def test_unknown_method(self, recorder):
        with pytest.raises(UnknownMethodError) as e:
            recorder.missing(1)

        assert str(e.value) == (
            "Generic %s.missing() method does not exist." % type_name(Recorder)
        )

        with pytest.raises(UnknownMethodError):
            recorder.invoke("missing")

        # still usable
        recorder.put("a", Point())

    def test_private_and_attributes_unknown(self, recorder):
        with pytest.raises(UnknownMethodError):
            recorder.invoke("_private")

        with pytest.raises(UnknownMethodError):
            recorder.invoke("calls")

        assert not hasattr(recorder, "missing")

    def test_forwarded_method_metadata(self, recorder):
        assert recorder.put.__name__ == "put"


class TestEnforcementToggle:
    def test_disabled_config(self, disabled):
        recorder = Recorder.generic(str, Point, config=disabled)

        assert not recorder.enabled
        assert recorder.signature is None
        assert recorder.types == ()
        # mismatch forwards without error
        assert recorder.put(0, "a") == "a"
        assert recorder.template.calls == [("put", 0, "a")]

    def test_enabled_config(self):
        recorder = Recorder.generic(str, Point, config=GenericConfig())

        with pytest.raises(TypeMismatchError):
            recorder.put(0, "a")

    def test_disabled_env(self, monkeypatch):
        monkeypatch.setenv(ENV_VARIABLE, "1")
        recorder = Recorder.generic(str, Point)

        assert not recorder.enabled
        assert recorder.put(0, "a") == "a"

    def test_flag_cached_per_instance(self, monkeypatch):
        recorder = Recorder.generic(str, Point)
        monkeypatch.setenv(ENV_VARIABLE, "1")

        with pytest.raises(TypeMismatchError):
            recorder.put(0, "a")

    def test_disabled_skips_declaration(self, disabled):
        # no signature map is built, so nothing can fail
        Generic(Undeclared, str, config=disabled)

    def test_disabled_unknown_method(self, disabled):
        recorder = Recorder.generic(str, Point, config=disabled)

        with pytest.raises(UnknownMethodError):
            recorder.missing()


class TestSignatureCache:
    def test_built_once_per_class(self, monkeypatch):
        builds = []

        def build(T):
            builds.append(T)
            return build_signature_map(T)

        monkeypatch.setattr(registry_module, "build_signature_map", build)

        a = Recorder.generic(str, Point)
        b = Recorder.generic(int, str)

        assert builds == [Recorder]
        assert a.signature is b.signature
        # the cached map is shared but the types are not
        assert a.types != b.types

    def test_custom_registry(self):
        class IsolatedGeneric(Generic):
            _registry = registry_module.SignatureRegistry()

        IsolatedGeneric(Recorder, str, Point)

        assert IsolatedGeneric._registry.is_registered(Recorder)
        assert not registry_module.default_registry.is_registered(Recorder)
