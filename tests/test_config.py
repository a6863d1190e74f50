import pytest
from panning.config import Config, load_config
from panning.directions import Direction
from panning.display import ScreenMetrics, primary_screen_metrics
from panning.errors import PanningConfigError
from panning.thresholds import DismissThreshold, DismissThresholdOverride, default_threshold, resolve_threshold


def test_missing_config_returns_defaults(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config == Config()
    assert config.panning.allowed == Direction.ALL


def test_load_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "dismiss:\n"
        "  velocity: 900\n"
        "  x_fraction: 0.5\n"
        "  bogus: 1\n"
        "screen:\n"
        "  width: 1000\n"
        "  height: 2000\n"
        "panning:\n"
        "  directions: [down]\n"
        "  direction_lock: true\n"
    )
    config = load_config(path)
    assert config.panning.allowed == Direction.DOWN
    assert config.panning.direction_lock is True
    threshold = config.dismiss.threshold_for(config.screen.metrics())
    assert threshold == DismissThreshold(velocity=900, x=500.0, y=500.0)


def test_invalid_direction_name(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("panning:\n  directions: [sideways]\n")
    with pytest.raises(PanningConfigError):
        load_config(path)


def test_negative_threshold_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("dismiss:\n  velocity: -1\n")
    with pytest.raises(PanningConfigError):
        load_config(path)


def test_non_mapping_document_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- up\n- down\n")
    with pytest.raises(PanningConfigError):
        load_config(path)


def test_default_threshold_quarters_screen():
    threshold = default_threshold(ScreenMetrics(width=1000, height=800))
    assert threshold == DismissThreshold(velocity=750.0, x=250.0, y=200.0)


def test_override_merge_keeps_unset_fields():
    defaults = DismissThreshold(velocity=750.0, x=250.0, y=200.0)
    merged = DismissThresholdOverride(y=0.0).merged_over(defaults)
    # 0 is a real value, not "unset"
    assert merged == DismissThreshold(velocity=750.0, x=250.0, y=0.0)


def test_screen_metrics_fallback_without_qapplication():
    fallback = ScreenMetrics(width=320, height=480)
    assert primary_screen_metrics(fallback) == fallback


def test_setup_logging_is_idempotent():
    import logging
    from panning.log import setup_logging

    root = logging.getLogger()
    setup_logging(logging.DEBUG)
    handlers = len(root.handlers)
    setup_logging(logging.DEBUG)
    assert len(root.handlers) == handlers


@pytest.mark.parametrize("body", [
    "dismiss:\n  velocity: fast\n",
    "dismiss:\n  velocity: null\n",
    "dismiss:\n  x_fraction: true\n",
    "screen:\n  width: wide\n",
    "screen:\n  height: 0\n",
])
def test_non_numeric_config_values_rejected(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body)
    with pytest.raises(PanningConfigError):
        load_config(path)


def test_threshold_mapping_with_string_rejected():
    with pytest.raises(PanningConfigError):
        resolve_threshold({"x": "50"}, ScreenMetrics())


def test_threshold_mapping_with_none_keeps_default():
    threshold = resolve_threshold({"x": None, "y": 10}, ScreenMetrics(width=400, height=800))
    assert threshold == DismissThreshold(velocity=750.0, x=100.0, y=10)


def test_thresholds_built_directly_are_validated():
    with pytest.raises(PanningConfigError):
        DismissThreshold(velocity=-1.0, x=0.0, y=0.0)
    with pytest.raises(PanningConfigError):
        DismissThresholdOverride(y=-5.0)
    with pytest.raises(PanningConfigError):
        DismissThresholdOverride(velocity=True)
    # Unset fields are fine
    assert DismissThresholdOverride().velocity is None


def test_screen_metrics_fallback_with_core_application():
    from PyQt5.QtCore import QCoreApplication

    # A non-GUI application has no screens to query
    app = QCoreApplication.instance() or QCoreApplication([])
    assert app is not None
    fallback = ScreenMetrics(width=640, height=360)
    assert primary_screen_metrics(fallback) == fallback
