import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "lint_subtitles.py"


@pytest.fixture
def lint_script():
    spec = importlib.util.spec_from_file_location("lint_subtitles", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def srt_file(tmp_path):
    path = tmp_path / "in.srt"
    path.write_text(
        "1\n00:00:01,000 --> 00:00:02,000\nسلام   دنیا\n\n"
        "2\n00:00:03,000 --> 00:00:04,000\nHello\n",
        encoding="utf-8",
    )
    return path


def test_lint_reports_flagged_captions(lint_script, srt_file, capsys):
    captions = lint_script.lint(srt_file)

    assert len(captions) == 2
    assert captions.all()[0].target_text == "سلام دنیا"
    assert lint_script.report(captions) == 1
    assert "no-persian-script" in capsys.readouterr().out


def test_main_writes_output_and_exits_nonzero(lint_script, srt_file, tmp_path, monkeypatch):
    output = tmp_path / "out.vtt"
    monkeypatch.setattr("sys.argv", ["lint_subtitles.py", str(srt_file), str(output)])

    with pytest.raises(SystemExit) as exc:
        lint_script.main()

    assert exc.value.code == 1
    assert output.read_text(encoding="utf-8").startswith("WEBVTT")
