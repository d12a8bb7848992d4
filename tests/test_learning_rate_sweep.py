import math

from learning_rate_sweep import run


def test_sweep_reports_each_learning_rate() -> None:
    results = run(learning_rates=(0.01, 0.1, 10.0), epochs=400)
    assert [result.learning_rate for result in results] == [0.01, 0.1, 10.0]
    # Larger stable rates make more progress within the same epoch budget.
    assert results[1].mse < results[0].mse
    assert not math.isfinite(results[2].mse)
