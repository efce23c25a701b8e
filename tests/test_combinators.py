"""
Tests for conjunctions, object schemas and nested field validators.
"""

import pytest
from pydantic import BaseModel

from fieldrules import (
    AllV,
    Combine,
    DictV,
    EmailMinMaxLength,
    EmailSchema,
    Err,
    MaxLength,
    MinLength,
    MinValue,
    NestedField,
    ObjectSchema,
    Ok,
    StringNotEmpty,
    StringSchema,
    to_validator,
    validation_context,
)


def message(result) -> str:
    assert isinstance(result, Err)
    return result.error.message


class TestCombine:
    def test_all_pass(self):
        v = Combine(StringSchema, MinLength(2), MaxLength(4))
        assert isinstance(v("abc"), Ok)

    def test_empty_combine_passes(self):
        v = Combine()
        for value in (None, 0, "", {}, [1, 2], object()):
            assert isinstance(v(value), Ok)

    def test_first_failure_wins(self):
        a = MinLength(1)  # "must be a string"
        b = MinValue(0)  # "must be an integer"
        assert message(Combine(a, b)(1.5)) == "must be a string"
        assert message(Combine(b, a)(1.5)) == "must be an integer"

    def test_stops_at_first_failure(self):
        calls = []

        def spy(value):
            calls.append(value)
            return Ok(value)

        assert isinstance(Combine(StringNotEmpty, spy)(""), Err)
        assert calls == []
        assert isinstance(Combine(StringNotEmpty, spy)("x"), Ok)
        assert calls == ["x"]

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            Combine(StringSchema, "not a validator")  # type: ignore[arg-type]

    def test_and_operator(self):
        v = StringSchema & MinLength(3)
        assert isinstance(v, AllV)
        assert isinstance(v("abcd"), Ok)
        assert message(v("ab")) == "must have a minimum length of 3"
        assert message(v(None)) == "must be a string"

    def test_and_operator_with_plain_function(self):
        def always_fails(value):
            return Err(StringNotEmpty("").error)

        v = always_fails & StringSchema
        assert isinstance(v, AllV)
        assert message(v(42)) == "cannot be empty"

    def test_chained_and_preserves_order(self):
        v = StringSchema & StringNotEmpty & MinLength(3)
        assert len(v.validators) == 3
        assert message(v("")) == "cannot be empty"


class TestEmailMinMaxLength:
    def test_valid(self):
        assert isinstance(EmailMinMaxLength(5, 20)("a@b.co"), Ok)

    def test_bad_format(self):
        assert message(EmailMinMaxLength(5, 20)("a@b.c")) == "invalid email format"

    def test_too_long(self):
        v = EmailMinMaxLength(5, 20)
        assert message(v("someone@example.com.au")) == "must have a maximum length of 20"

    def test_wrong_type(self):
        assert message(EmailMinMaxLength(5, 20)(7)) == "must be a string or nil"


class TestObjectSchema:
    def test_valid_object(self):
        v = ObjectSchema({"here": StringSchema})
        assert isinstance(v({"here": "yes"}), Ok)

    def test_missing_key(self):
        v = ObjectSchema({"here": StringSchema})
        result = v({"elsewhere": "x"})
        assert message(result) == "field 'here' not found"
        assert result.error.path == ("here",)

    def test_invalid_value_propagates_unmodified(self):
        v = ObjectSchema({"here": StringSchema})
        result = v({"here": 1})
        assert message(result) == "must be a string or nil"
        assert result.error.path == ("here",)

    def test_non_mapping_passes(self):
        v = ObjectSchema({"here": StringSchema})
        for value in ("text", 42, None, [{"here": 1}]):
            assert isinstance(v(value), Ok)

    def test_non_mapping_fails_in_strict_context(self):
        v = ObjectSchema({"here": StringSchema})
        with validation_context(strict_objects=True):
            assert message(v("text")) == "must be an object"
            assert isinstance(v({"here": "x"}), Ok)
        assert isinstance(v("text"), Ok)

    def test_nested_objects(self):
        v = ObjectSchema(
            {"somewhere": ObjectSchema({"here": StringSchema})},
        )
        assert isinstance(v({"somewhere": {"here": "ok"}}), Ok)
        assert message(v({"somewhere": {}})) == "field 'here' not found"

        result = v({"somewhere": {"here": False}})
        assert message(result) == "must be a string or nil"
        assert result.error.path == ("somewhere", "here")

    def test_dict_shorthand_for_nested(self):
        v = ObjectSchema({"somewhere": {"here": StringSchema}})
        assert isinstance(v.fields["somewhere"], DictV)
        assert message(v({"somewhere": {"here": 3}})) == "must be a string or nil"

    def test_fields_are_read_only_and_hashable(self):
        source = {"here": StringSchema}
        v = ObjectSchema(source)
        source["extra"] = StringSchema
        assert "extra" not in v.fields
        with pytest.raises(TypeError):
            v.fields["extra"] = StringSchema  # type: ignore[index]

        direct = DictV(fields={"here": StringSchema})
        assert direct == v
        assert hash(direct) == hash(v)
        assert isinstance(hash(Combine(StringSchema, v)), int)

    def test_pydantic_model_input(self):
        class Address(BaseModel):
            city: str
            zip_code: str

        v = ObjectSchema({"city": StringNotEmpty, "zip_code": MinLength(5)})
        assert isinstance(v(Address(city="Oslo", zip_code="01500")), Ok)
        assert message(v(Address(city="", zip_code="01500"))) == "cannot be empty"

    def test_to_validator_dict(self):
        v = to_validator({"name": StringSchema})
        assert isinstance(v, DictV)
        with pytest.raises(TypeError):
            to_validator(42)


class TestNestedField:
    def test_present_key_validated(self):
        v = NestedField("email", EmailSchema)
        assert isinstance(v({"email": "a@b.co"}), Ok)
        result = v({"email": "nope"})
        assert message(result) == "invalid email format"
        assert result.error.path == ("email",)

    def test_missing_key_passes(self):
        v = NestedField("email", EmailSchema)
        assert isinstance(v({}), Ok)
        assert isinstance(v({"other": 1}), Ok)

    def test_non_mapping_passes(self):
        v = NestedField("email", EmailSchema)
        assert isinstance(v("a string"), Ok)
        with validation_context(strict_objects=True):
            assert isinstance(v("a string"), Ok)
