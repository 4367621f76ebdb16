import dataclasses
import math

import pytest

from hairstrands.vectors import (
    Float2,
    Float3,
    Float4,
    Int2,
    Int3,
    Int4,
    UInt2,
    UInt3,
    UInt4,
    convert,
)


def test_splat_fills_every_component():
    assert Float2.splat(7) == Float2(7, 7)
    assert Float3.splat(7) == Float3(7, 7, 7)
    assert Float4.splat(7) == Float4(7, 7, 7, 7)
    assert Int2.splat(7) == Int2(7, 7)
    assert Int3.splat(7) == Int3(7, 7, 7)
    assert Int4.splat(7) == Int4(7, 7, 7, 7)
    assert UInt2.splat(7) == UInt2(7, 7)
    assert UInt3.splat(7) == UInt3(7, 7, 7)
    assert UInt4.splat(7) == UInt4(7, 7, 7, 7)
    assert len(UInt4.splat(1)) == 4


def test_addition_is_commutative_and_subtraction_inverts():
    pairs = [
        (Float2(1, 2), Float2.splat(3)),
        (Float3(1, 2, 3), Float3.splat(3)),
        (Float4(1, 2, 3, 4), Float4.splat(3)),
        (Int2(1, 2), Int2.splat(3)),
        (Int3(1, 2, 3), Int3.splat(3)),
        (Int4(1, 2, 3, 4), Int4.splat(3)),
        (UInt2(1, 2), UInt2.splat(3)),
        (UInt3(1, 2, 3), UInt3.splat(3)),
        (UInt4(1, 2, 3, 4), UInt4.splat(3)),
    ]
    for a, b in pairs:
        assert a + b == b + a
        assert (a + b) - b == a


def test_addition_values():
    assert Float3(1, 2, 3) + Float3(4, 5, 6) == Float3(5, 7, 9)
    assert Int2(1, 2) - Int2(3, 3) == Int2(-2, -1)


def test_scalar_operations_match_splat():
    assert Float3(1, 2, 3) + 3 == Float3(4, 5, 6)
    assert 3 + Float3(1, 2, 3) == Float3(4, 5, 6)
    assert 10 - Int2(1, 2) == Int2(9, 8)
    assert Int3(1, 2, 3) - 1 == Int3(0, 1, 2)
    assert UInt2(1, 2) * 2 == UInt2(2, 4)
    assert 2 * Float4(1, 2, 3, 4) == Float4(2, 4, 6, 8)
    assert Int4(1, 2, 3, 4) * Int4.splat(2) == Int4(2, 4, 6, 8)


def test_in_place_rebinds_to_new_value():
    a = Float2(1, 2)
    original = a
    a += Float2.splat(1)
    assert a == Float2(2, 3)
    assert original == Float2(1, 2)
    b = UInt3(1, 2, 3)
    b += UInt3.splat(1)
    assert b == UInt3(2, 3, 4)


def test_negation():
    assert -Float3(1, -2, 3) == Float3(-1, 2, -3)
    assert -(-Int4(1, 2, 3, 4)) == Int4(1, 2, 3, 4)
    assert -Int2(1, 2) + Int2(1, 2) == Int2.splat(0)


@pytest.mark.parametrize("cls", [Float2, Float3, Float4])
def test_float_division(cls):
    a = convert(Float4(1, 2, 3, 4), cls)
    assert a / 2 * 2 == a
    assert a / a == cls.splat(1)
    assert 1 / a == cls.splat(1) / a


def test_float_division_by_zero_follows_ieee():
    r = Float2(1, -1) / 0
    assert r.x == math.inf
    assert r.y == -math.inf
    z = Float2(0, 0) / Float2(0, 0)
    assert math.isnan(z.x) and math.isnan(z.y)


def test_integer_vectors_do_not_divide():
    with pytest.raises(TypeError):
        Int2(1, 2) / 2
    with pytest.raises(TypeError):
        Int3(1, 2, 3) / 2
    with pytest.raises(TypeError):
        UInt4(1, 2, 3, 4) / 2


def test_unsigned_vectors_do_not_negate():
    with pytest.raises(TypeError):
        -UInt2(1, 2)
    with pytest.raises(TypeError):
        -UInt3(1, 2, 3)
    with pytest.raises(TypeError):
        -UInt4(1, 2, 3, 4)


def test_signed_wraps_like_int32():
    assert Int2.splat(2**31 - 1) + 1 == Int2.splat(-(2**31))
    assert Int3.splat(-(2**31)) - 1 == Int3.splat(2**31 - 1)


def test_mixed_vector_types_are_rejected():
    with pytest.raises(TypeError):
        Float2(1, 2) + Int2(1, 2)
    with pytest.raises(TypeError):
        Float2(1, 2) + Float3(1, 2, 3)


def test_integer_vectors_reject_float_scalars_and_components():
    with pytest.raises(TypeError):
        Int2(1, 2) * 1.5
    with pytest.raises(TypeError):
        Int2(1.5, 2)


def test_float_vector_rejects_non_numbers():
    with pytest.raises(TypeError):
        Float2("a", 1)


def test_components_are_coerced_and_compared_by_value():
    v = Float2(1, 2)
    assert v == Float2(1.0, 2.0)
    assert isinstance(v.x, float)
    assert hash(v) == hash(Float2(1.0, 2.0))


def test_vectors_are_immutable():
    v = Float3(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0
    assert v[2] == 3.0


def test_convert_pads_with_zero():
    assert convert(Float2(1, 2), Float3) == Float3(1, 2, 0)
    assert convert(Int2(1, 2), Int3) == Int3(1, 2, 0)
    assert convert(UInt3(1, 2, 3), UInt4) == UInt4(1, 2, 3, 0)


def test_convert_uses_extra_component():
    assert convert(Float2(1, 2), Float3, 5) == Float3(1, 2, 5)
    assert convert(Float3(1, 2, 3), Float4, 9) == Float4(1, 2, 3, 9)
    assert convert(Int3(1, 2, 3), Int4, -4) == Int4(1, 2, 3, -4)


def test_convert_truncates_longer_vectors():
    assert convert(Float4(1, 2, 3, 4), Float3) == Float3(1, 2, 3)
    assert convert(Float3(1, 2, 3), Float2) == Float2(1, 2)
    assert convert(Int3(4, 5, 6), Int2) == Int2(4, 5)


def test_convert_float_to_int_truncates_toward_zero():
    assert convert(Float2(1.9, -1.9), Int2) == Int2(1, -1)


def test_convert_between_signed_and_unsigned():
    assert convert(Int2(-1, 3), UInt2) == UInt2(-1, 3)
    assert convert(UInt3(1, 2, 3), Int3) == Int3(1, 2, 3)


def test_convert_round_trip_through_float():
    v = Int3(-5, 0, 12)
    assert convert(convert(v, Float3), Int3) == v


def test_convert_rejects_bad_arguments():
    with pytest.raises(TypeError):
        convert(Float3(1, 2, 3), Float2, 9)
    with pytest.raises(TypeError):
        convert(Float2(1, 2), Float3, 1, 2)
    with pytest.raises(TypeError):
        convert(5, Float3)
    with pytest.raises(TypeError):
        convert(Float2(1, 2), int)