from __future__ import annotations

from pathlib import Path

from conftest import write_hot

from vitetags.assets.mode import ModeDetector
from vitetags.domain.models import ResolverState
from vitetags.infrastructure.config import ViteConfig


def make_detector(**config) -> ModeDetector:
    return ModeDetector(ViteConfig(**config), ResolverState())


def test_hot_file_lives_in_working_directory(project: Path) -> None:
    detector = make_detector()
    assert detector.hot_file() == project.resolve() / "hot"


def test_root_setting_overrides_cwd(tmp_path: Path) -> None:
    detector = make_detector(root=tmp_path)
    assert detector.work_path() == tmp_path.resolve()
    assert detector.work_path("/build/") == tmp_path.resolve() / "build"


def test_production_without_hot_file(project: Path) -> None:
    detector = make_detector()
    assert detector.is_dev() is False
    assert detector.get_host() == ""


def test_dev_flag_forces_dev_mode(project: Path) -> None:
    detector = make_detector(dev=True)
    assert detector.is_dev() is True
    assert detector.get_host() == ""


def test_hot_file_enables_dev_mode(project: Path) -> None:
    write_hot(project)
    detector = make_detector()
    assert detector.is_dev() is True


def test_is_dev_rechecks_the_filesystem(project: Path) -> None:
    detector = make_detector()
    assert detector.is_dev() is False
    hot = write_hot(project)
    assert detector.is_dev() is True
    hot.unlink()
    assert detector.is_dev() is False


def test_host_is_trimmed_with_single_trailing_slash(project: Path) -> None:
    write_hot(project, "  http://localhost:5173/\n")
    assert make_detector().get_host() == "http://localhost:5173/"


def test_host_is_cached_for_instance(project: Path) -> None:
    hot = write_hot(project, "http://localhost:5173")
    detector = make_detector()
    assert detector.get_host() == "http://localhost:5173/"

    hot.write_text("http://127.0.0.1:3000", encoding="utf-8")
    assert detector.get_host() == "http://localhost:5173/"
    assert make_detector().get_host() == "http://127.0.0.1:3000/"
