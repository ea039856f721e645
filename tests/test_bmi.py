import pytest

from imt_fitness.services.bmi import Category, classify, compute_index, evaluate


def test_normal_weight_client():
    imt, category = evaluate(55, 160)
    assert imt == pytest.approx(21.48, abs=0.01)
    assert category is Category.NORMAL


def test_obese_client():
    imt, category = evaluate(90, 172)
    assert imt == pytest.approx(30.42, abs=0.01)
    assert category is Category.OBESE


@pytest.mark.parametrize("index, expected", [
    (0.0, Category.UNDERWEIGHT),
    (18.49, Category.UNDERWEIGHT),
    (18.5, Category.NORMAL),
    (24.99, Category.NORMAL),
    (25.0, Category.OVERWEIGHT),
    (29.99, Category.OVERWEIGHT),
    (30.0, Category.OBESE),
    (55.0, Category.OBESE),
])
def test_lower_bounds_are_inclusive(index, expected):
    assert classify(index) is expected


def test_height_is_taken_in_centimetres():
    assert compute_index(80, 200) == pytest.approx(20.0)


def test_category_values_are_lowercase_names():
    assert [c.value for c in Category] == ["underweight", "normal", "overweight", "obese"]
