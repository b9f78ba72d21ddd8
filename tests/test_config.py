import config
import main


def test_active_params_merge_mode_values(monkeypatch):
    params = config.get_active_params()
    assert params["CHECK_MONOTONIC_ORDER"] is True
    assert params["SLOPE_RANGE"] == config.INTEGER["SLOPE_RANGE"]

    monkeypatch.setattr(config, "INTEGER_MODE", False)
    params = config.get_active_params()
    assert params["INTEGER_MODE"] is False
    assert params["SLOPE_RANGE"] == config.FLOAT["SLOPE_RANGE"]


def test_demo_runs_clean(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(tmp_path))

    assert main.run_demo(seed=3) == 0

    out = capsys.readouterr().out
    assert "[OK]" in out
    assert "[WARN]" not in out
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "seed3_dynamic.png",
        "seed3_monotonic.png",
        "seed3_static.png",
    ]


def test_demo_float_mode(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(tmp_path))
    monkeypatch.setattr(config, "INTEGER_MODE", False)

    assert main.run_demo(seed=5) == 0
