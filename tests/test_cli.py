import logging
import xml.etree.ElementTree as ET

import pytest

import svgpie.__main__ as cli

SCRIPT = '''chart width=120 height=120 radius=50
slice "Red" 0.5 #fe5555
slice "Blue" 0.5 #3366fe
'''


def test_main_writes_svg_document(tmp_path):
    script_path = tmp_path / "chart.pie"
    script_path.write_text(SCRIPT, encoding="utf-8")
    svg_path = tmp_path / "out" / "chart.svg"

    cli.main([str(script_path), "--output", str(svg_path)])

    root = ET.fromstring(svg_path.read_bytes())
    assert root.get("viewBox") == "0, 0, 120, 120"
    assert svg_path.read_text(encoding="utf-8").count("<clipPath") == 2


def test_main_prints_to_stdout(tmp_path, capsys):
    script_path = tmp_path / "chart.pie"
    script_path.write_text(SCRIPT, encoding="utf-8")

    cli.main([str(script_path)])

    assert "<svg" in capsys.readouterr().out


def test_main_passes_parsed_chart_to_renderer(tmp_path, monkeypatch, capsys):
    script_path = tmp_path / "chart.pie"
    script_path.write_text(SCRIPT, encoding="utf-8")
    rendered = []

    def _create(slices, options):
        rendered.append((slices, options))
        return "svg document"

    monkeypatch.setattr(cli, "create_pie_chart", _create)

    cli.main([str(script_path)])

    slices, options = rendered[0]
    assert [s.label for s in slices] == ["Red", "Blue"]
    assert options.circle_radius == 50
    assert capsys.readouterr().out == "svg document"


def test_main_logs_consistency_warnings(tmp_path, caplog):
    script_path = tmp_path / "chart.pie"
    script_path.write_text('slice "Half" 0.5 #fe5555\n', encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        cli.main([str(script_path), "--output", str(tmp_path / "half.svg")])

    assert any("ratio_sum_short" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    "script",
    ['slice "Too much" 1.5 #fe5555\n', 'slice "Broken 0.5 #fe5555\n'],
)
def test_main_exits_on_invalid_script(tmp_path, script):
    script_path = tmp_path / "bad.pie"
    script_path.write_text(script, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(script_path)])

    assert excinfo.value.code == 1
