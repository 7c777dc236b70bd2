import pytest

import report_template_geometry.diagnostics
import report_template_geometry.models


diagnostics = report_template_geometry.diagnostics


#============================================
@pytest.mark.parametrize("text,expected", [
	("", "811c9dc5"),
	("a", "e40c292c"),
	("foobar", "bf9cf968"),
])
def test_fnv1a_hex(text: str, expected: str) -> None:
	assert diagnostics.fnv1a_hex(text) == expected


#============================================
def test_fingerprint_is_stable_and_sensitive() -> None:
	"""
	Equal templates hash equally and any geometry change moves the hash.
	"""
	element = report_template_geometry.models.TextElement(id="t", x=10.0, y=20.0)
	template = report_template_geometry.models.Template(elements=(element,), id="tpl")
	moved = report_template_geometry.models.Template(
		elements=(report_template_geometry.models.TextElement(id="t", x=11.0, y=20.0),),
		id="tpl",
	)
	first = diagnostics.build_template_fingerprint(template)
	assert first == diagnostics.build_template_fingerprint(template)
	assert first.elements == 1
	assert first.json_len == len(diagnostics.canonical_json(template))
	assert first.hash != diagnostics.build_template_fingerprint(moved).hash


#============================================
def test_format_event() -> None:
	line = diagnostics.format_event({
		"event": "convert_page_size",
		"requestId": "abc",
		"scaleX": 1.0285714285714285,
		"didNormalize": False,
		"templateId": None,
		"elements": 3,
	})
	assert line == "[DBG_CONVERT_PAGESIZE] requestId=abc scaleX=1.028571 didNormalize=false templateId= elements=3"


#============================================
def test_print_sink_writes_one_line(capsys) -> None:
	"""
	Events without an explicit sink are printed.
	"""
	debug = diagnostics.DebugOptions(enabled=True, request_id="r1", reason="save")
	template = report_template_geometry.models.Template(id="tpl")
	diagnostics.emit(None, debug, template, "normalize_page_size", {"didNormalize": True})
	captured = capsys.readouterr()
	assert captured.out == "[DBG_NORMALIZE_PAGESIZE] requestId=r1 templateId=tpl reason=save didNormalize=true\n"


#============================================
def test_is_enabled() -> None:
	assert not diagnostics.is_enabled(None)
	assert not diagnostics.is_enabled(diagnostics.DebugOptions())
	assert diagnostics.is_enabled(diagnostics.DebugOptions(enabled=True))


#============================================
def test_fnv1a_hashes_utf16_code_units() -> None:
	"""
	Characters outside the BMP hash as their surrogate pair.
	"""
	value = diagnostics.FNV_OFFSET_BASIS
	for unit in (0xD83D, 0xDE00):
		value ^= unit
		value = (value * diagnostics.FNV_PRIME) & 0xFFFFFFFF
	assert diagnostics.fnv1a_hex("\U0001F600") == f"{value:08x}"
	assert diagnostics.utf16_length("\U0001F600") == 2
	assert diagnostics.utf16_length("abc") == 3
