import pytest

from struct_builder.core.optionality import OptionalType, RequiredType, classify, generic_argument
from struct_builder.models import GenericType, PlainType, TypeReference

I32 = PlainType(name="i32")


def test_option_of_one_argument_is_optional() -> None:
    assert classify(GenericType(name="Option", arguments=(I32,))) == OptionalType(inner=I32)


def test_inner_type_may_itself_be_generic() -> None:
    inner = GenericType(name="Vec", arguments=(I32,))
    assert classify(GenericType(name="Option", arguments=(inner,))) == OptionalType(inner=inner)


@pytest.mark.parametrize(
    "type_ref",
    [
        I32,
        PlainType(name="Option"),
        GenericType(name="Option", arguments=()),
        GenericType(name="Option", arguments=(I32, I32)),
        GenericType(name="Maybe", arguments=(I32,)),
        GenericType(name="std::option::Option", arguments=(I32,)),
        GenericType(name="Vec", arguments=(I32,)),
    ],
    ids=["plain", "bare-name", "no-args", "two-args", "other-name", "qualified-path", "vec"],
)
def test_other_shapes_are_required(type_ref: TypeReference) -> None:
    assert classify(type_ref) == RequiredType(type=type_ref)


def test_wrapper_name_is_configurable() -> None:
    maybe = GenericType(name="Maybe", arguments=(I32,))

    assert classify(maybe, wrapper_name="Maybe") == OptionalType(inner=I32)
    assert classify(GenericType(name="Option", arguments=(I32,)), wrapper_name="Maybe") == RequiredType(
        type=GenericType(name="Option", arguments=(I32,))
    )


def test_generic_argument_only_matches_arity_one() -> None:
    assert generic_argument(GenericType(name="Box", arguments=(I32,))) == ("Box", I32)
    assert generic_argument(GenericType(name="Result", arguments=(I32, I32))) is None
    assert generic_argument(I32) is None
