import json

import pytest

import report_template_geometry.cli


#============================================
@pytest.fixture
def template_path(tmp_path, sample_template_data: dict):
	path = tmp_path / "template.json"
	path.write_text(json.dumps(sample_template_data), encoding="utf-8")
	return path


#============================================
def test_parse_args_defaults() -> None:
	args = report_template_geometry.cli.parse_args(["template.json"])
	assert args.input_path == "template.json"
	assert args.output_path is None
	assert args.to_size is None
	assert args.audit is False
	assert args.show_regions is True


#============================================
def test_normalize_fitting_template(tmp_path, template_path, sample_template_data: dict, capsys) -> None:
	"""
	A template that fits is written back unchanged.
	"""
	output_path = tmp_path / "out.json"
	report_template_geometry.cli.main([str(template_path), "-o", str(output_path)])
	captured = capsys.readouterr()
	assert "Normalized: False" in captured.out
	assert json.loads(output_path.read_text(encoding="utf-8")) == sample_template_data


#============================================
def test_convert_to_letter(tmp_path, template_path, capsys) -> None:
	output_path = tmp_path / "letter.json"
	result = report_template_geometry.cli.main(
		[str(template_path), "-s", "Letter", "-o", str(output_path)],
	)
	assert result is None
	captured = capsys.readouterr()
	assert "Converted to: Letter/portrait" in captured.out
	data = json.loads(output_path.read_text(encoding="utf-8"))
	assert data["pageSize"] == "Letter"
	assert data["elements"][0]["x"] > 50


#============================================
def test_audit_preview_and_debug(tmp_path, template_path, capsys) -> None:
	"""
	Audit, preview, and debug output all appear in one run.
	"""
	preview_path = tmp_path / "preview.pdf"
	report_template_geometry.cli.main(
		[str(template_path), "-a", "-d", "-p", str(preview_path), "-R"],
	)
	captured = capsys.readouterr()
	assert "Layout issues: 1" in captured.out
	assert "customer_name: out_of_region" in captured.out
	assert "[DBG_NORMALIZE_PAGESIZE]" in captured.out
	assert "reason=cli_normalize" in captured.out
	assert preview_path.exists()


#============================================
def test_rejects_unknown_page_size(template_path) -> None:
	with pytest.raises(SystemExit):
		report_template_geometry.cli.main([str(template_path), "-s", "Legal"])
