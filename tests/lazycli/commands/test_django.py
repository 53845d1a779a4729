from pathlib import Path

import pytest

from lazycli import paths
from lazycli.commands import django as django_cmd
from lazycli.errors import PreconditionError, StepFailedError, UsageError
from tests.lazycli.helpers import FakeRunner

SETTINGS = """\
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
]

TEMPLATES = [{'DIRS': []}]
"""


def _startproject(request) -> None:
    name = request.argv[2]
    package = request.cwd / name
    package.mkdir(parents=True, exist_ok=True)
    (package / "settings.py").write_text(SETTINGS, encoding="utf-8")


def _django_admin(project_root: Path) -> str:
    return str(paths.venv_executable(project_root / "venv", "django-admin"))


def test_blog_project_gets_directories_and_settings(
    tmp_path: Path, fake_runner: FakeRunner, on_path, answers
) -> None:
    on_path("python3")
    answers("n")
    root = tmp_path / "blog"
    fake_runner.reply(_django_admin(root), "startproject", effect=_startproject)

    assert django_cmd.django_init(tmp_path, "blog") == root

    venv_python = str(paths.venv_executable(root / "venv", "python"))
    assert fake_runner.argvs == [
        ["python3", "-m", "venv", "venv"],
        [venv_python, "-m", "pip", "install", "django"],
        [_django_admin(root), "startproject", "blog", "."],
    ]
    assert set(fake_runner.cwds()) == {root}
    for dirname in ("static", "templates", "media"):
        assert (root / dirname).is_dir()
    settings = (root / "blog" / "settings.py").read_text()
    assert "    'django.contrib.staticfiles',\n" in settings
    assert "STATICFILES_DIRS = [BASE_DIR / 'static']" in settings
    assert "MEDIA_URL = '/media/'" in settings
    assert "MEDIA_ROOT = BASE_DIR / 'media'" in settings


def test_settings_patch_is_idempotent(tmp_path: Path) -> None:
    package = tmp_path / "blog"
    package.mkdir()
    (package / "settings.py").write_text(SETTINGS, encoding="utf-8")

    django_cmd.configure_settings(tmp_path, "blog")
    once = (package / "settings.py").read_text()
    django_cmd.configure_settings(tmp_path, "blog")

    assert (package / "settings.py").read_text() == once
    assert once.count(django_cmd.SETTINGS_MARKER) == 1
    assert once.count("django.contrib.staticfiles") == 1


def test_patch_skips_insert_without_installed_apps_literal() -> None:
    patched = django_cmd.patch_settings("DEBUG = True", "\n# lazycli: static, templates and media\n")

    assert "staticfiles" not in patched
    assert patched.startswith("DEBUG = True\n")


def test_existing_venv_is_reused(
    tmp_path: Path,
    fake_runner: FakeRunner,
    on_path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    on_path("python3", "virtualenv")
    root = tmp_path / "blog"
    (root / "venv").mkdir(parents=True)

    django_cmd.django_init(tmp_path, "blog")

    output = capsys.readouterr().out
    assert "Virtual environment 'venv' already exists. Reusing it." in output
    assert "Creating new one" not in output
    assert not any("venv" in argv or "virtualenv" in argv for argv in fake_runner.argvs)


def test_virtualenv_on_path_is_preferred(
    tmp_path: Path, fake_runner: FakeRunner, on_path
) -> None:
    on_path("python3", "virtualenv")

    django_cmd.django_init(tmp_path, "shop")

    assert fake_runner.argvs[0] == ["virtualenv", "venv"]


def test_virtualenv_install_falls_back_to_venv(
    tmp_path: Path, fake_runner: FakeRunner, on_path, answers
) -> None:
    on_path("python3")
    answers("y")
    fake_runner.reply("python3", "-m", "pip", returncode=1)

    django_cmd.django_init(tmp_path, "shop")

    assert fake_runner.argvs[:2] == [
        ["python3", "-m", "pip", "install", "virtualenv"],
        ["python3", "-m", "venv", "venv"],
    ]


def test_venv_creation_failure_is_fatal(
    tmp_path: Path, fake_runner: FakeRunner, on_path, answers
) -> None:
    on_path("python3")
    answers("n")
    fake_runner.reply("python3", "-m", "venv", returncode=1)

    with pytest.raises(StepFailedError):
        django_cmd.django_init(tmp_path, "shop")

    assert len(fake_runner.requests) == 1


def test_requires_python3(tmp_path: Path, fake_runner: FakeRunner, on_path) -> None:
    with pytest.raises(PreconditionError):
        django_cmd.django_init(tmp_path, "blog")

    assert fake_runner.requests == []
    assert not (tmp_path / "blog").exists()


def test_requires_name(tmp_path: Path, fake_runner: FakeRunner, on_path) -> None:
    on_path("python3")

    with pytest.raises(UsageError):
        django_cmd.django_init(tmp_path, "  ")

    assert fake_runner.requests == []
