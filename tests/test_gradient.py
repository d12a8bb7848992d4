import pytest

from area_price_regression.gradient import Gradient, gradient, sample_error
from area_price_regression.model import Params, predict


def test_predict_computes_linear_function() -> None:
    assert predict(4.0, Params(weight=2.0, bias=3.0)) == pytest.approx(11.0)


def test_sample_error_is_signed() -> None:
    assert sample_error(10.0, 8.0) == pytest.approx(2.0)
    assert sample_error(8.0, 10.0) == pytest.approx(-2.0)


def test_gradient_partial_derivatives() -> None:
    grad = gradient(x=2.0, error=3.0, dataset_size=4)
    assert grad.d_weight == pytest.approx(3.0)
    assert grad.d_bias == pytest.approx(1.5)


def test_gradient_rejects_empty_dataset() -> None:
    with pytest.raises(ValueError):
        gradient(x=1.0, error=1.0, dataset_size=0)


def test_gradient_addition_and_scaling() -> None:
    total = Gradient(1.0, 2.0) + Gradient(0.5, -1.0)
    assert total == Gradient(1.5, 1.0)
    assert 2.0 * total == Gradient(3.0, 2.0)
    assert total * 0.5 == Gradient(0.75, 0.5)
    assert Gradient.zero() + total == total


def test_value_types_are_immutable() -> None:
    params = Params.zero()
    with pytest.raises(AttributeError):
        params.weight = 1.0  # type: ignore[misc]
