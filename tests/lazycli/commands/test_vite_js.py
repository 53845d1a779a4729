from pathlib import Path

import pytest

from lazycli.commands import vite_js as vite_js_cmd
from lazycli.errors import SetupCancelled
from tests.lazycli.helpers import FakeRunner


def _scaffold(entry: str):
    def effect(request) -> None:
        path = request.cwd / request.argv[2] / entry
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("import App from './App'\n", encoding="utf-8")

    return effect


def test_react_with_tailwind_and_daisyui(
    tmp_path: Path, fake_runner: FakeRunner, on_path, answers
) -> None:
    fake_runner.reply("npx", "create-vite", effect=_scaffold("src/main.jsx"))
    answers("2", "1", "0", "0", "0", "1", "1", "1")

    ctx = vite_js_cmd.vite_js_init(tmp_path, "shop")

    root = tmp_path / "shop"
    assert ctx.root == root
    assert fake_runner.argvs == [
        ["npx", "create-vite", "shop", "--template", "react"],
        ["npm", "install"],
        ["npm", "install", "axios", "lucide-react"],
        ["npm", "install", "tailwindcss@latest", "@tailwindcss/vite@latest", "daisyui@latest"],
    ]
    assert fake_runner.cwds()[0] == tmp_path
    assert "@vitejs/plugin-react" in (root / "vite.config.js").read_text()
    assert (root / "src" / "index.css").read_text() == (
        '@import "tailwindcss";\n@plugin "daisyui";\n'
    )
    main = (root / "src" / "main.jsx").read_text().splitlines()
    assert main[0] == "import './index.css'"
    assert main.count("import './index.css'") == 1


def test_vanilla_without_tailwind_skips_daisyui_question(
    tmp_path: Path, fake_runner: FakeRunner, on_path, answers
) -> None:
    on_path("yarn")
    shown = answers("1", "0", "0", "0", "0", "0")

    vite_js_cmd.vite_js_init(tmp_path, "site")

    root = tmp_path / "site"
    assert len(shown) == 6
    assert fake_runner.argvs == [
        ["npx", "create-vite", "site", "--template", "vanilla"],
        ["yarn", "install"],
    ]
    assert "font-family" in (root / "src" / "index.css").read_text()
    assert not (root / "vite.config.js").exists()


def test_tailwind_uses_existing_style_css(
    tmp_path: Path, fake_runner: FakeRunner, on_path, answers
) -> None:
    fake_runner.reply("npx", "create-vite", effect=_scaffold("src/style.css"))
    answers("3", "0", "0", "0", "0", "1", "0")

    vite_js_cmd.vite_js_init(tmp_path, "board")

    root = tmp_path / "board"
    assert (root / "src" / "style.css").read_text() == '@import "tailwindcss";\n'
    assert "@vitejs/plugin-vue" in (root / "vite.config.js").read_text()


def test_cancel_before_generator(tmp_path: Path, fake_runner: FakeRunner, answers) -> None:
    answers("4", "1", "-1")

    with pytest.raises(SetupCancelled):
        vite_js_cmd.vite_js_init(tmp_path, "kit")

    assert fake_runner.requests == []
