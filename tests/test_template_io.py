import json
import math

import pytest

import report_template_geometry.models
import report_template_geometry.template_io


template_io = report_template_geometry.template_io
models = report_template_geometry.models


#============================================
def test_round_trip_keeps_unknown_keys(sample_template_data: dict) -> None:
	"""
	Reading and writing a template returns the same plain data.
	"""
	template = template_io.template_from_dict(sample_template_data)
	assert template_io.template_to_dict(template) == sample_template_data


#============================================
def test_elements_dispatch_on_type(sample_template_data: dict) -> None:
	template = template_io.template_from_dict(sample_template_data)
	kinds = [type(element) for element in template.elements]
	assert kinds == [
		models.LabelElement,
		models.TextElement,
		models.TableElement,
		models.ImageElement,
	]
	table = template.elements[2]
	assert [column.width for column in table.columns] == [220.0, 80.0, 100.0, 120.0]
	assert table.columns[2].min_font_size == 8.0
	assert table.summary.style.total_top_border_width == 1.2
	assert table.extra["showGrid"] is True
	assert template.extra["name"] == "Standard quote"


#============================================
def test_unknown_type_and_defaults() -> None:
	"""
	Unknown types become generic elements and missing coordinates read as zero.
	"""
	element = template_io.element_from_dict({"id": "line", "type": "line", "x2": 40})
	assert isinstance(element, models.GenericElement)
	assert element.type == "line"
	assert (element.x, element.y) == (0.0, 0.0)
	assert element.extra == {"x2": 40}
	assert template_io.element_to_dict(element) == {"id": "line", "type": "line", "x": 0.0, "y": 0.0, "x2": 40}

	cards = template_io.element_from_dict({"id": "cards", "type": "cardList", "x": 10, "y": 20})
	assert cards.card_height == 90.0


#============================================
def test_template_defaults() -> None:
	template = template_io.template_from_dict({})
	assert template.page_size == "A4"
	assert template.orientation == "portrait"
	assert template.elements == ()
	assert template.region_bounds is None
	assert template.structure_type is None


#============================================
def test_region_bounds_missing_edges_are_nan() -> None:
	data = {"regionBounds": {"header": {"yTop": 0, "yBottom": 200}, "body": {"yTop": 200}}}
	bounds = template_io.template_from_dict(data).region_bounds
	assert bounds.header == models.RegionSpan(0.0, 200.0)
	assert math.isnan(bounds.body.y_bottom)
	assert math.isnan(bounds.footer.y_top)
	written = template_io.region_bounds_to_dict(bounds)
	assert written["body"] == {"yTop": 200.0, "yBottom": None}


#============================================
@pytest.mark.parametrize("data", [
	[],
	{"elements": {"id": "x"}},
	{"elements": ["text"]},
	{"elements": [{"id": "t", "type": "table", "columns": "a,b"}]},
	{"elements": [{"id": "t", "type": "table", "columns": [3]}]},
])
def test_malformed_templates_raise(data: object) -> None:
	with pytest.raises(ValueError):
		template_io.template_from_dict(data)


#============================================
def test_booleans_are_not_numbers() -> None:
	assert template_io.read_number(True) is None
	assert template_io.read_number("12") is None
	assert template_io.read_number(12) == 12.0


#============================================
def test_load_and_write_template(tmp_path, sample_template_data: dict) -> None:
	"""
	Templates survive a trip through a JSON file.
	"""
	source = tmp_path / "template.json"
	source.write_text(json.dumps(sample_template_data), encoding="utf-8")
	template = template_io.load_template(source)
	output = tmp_path / "out.json"
	template_io.write_template(output, template)
	assert json.loads(output.read_text(encoding="utf-8")) == sample_template_data
	assert template_io.load_template(output) == template


#============================================
def test_non_finite_numbers_write_as_null(tmp_path) -> None:
	"""
	NaN and infinite geometry becomes JSON null so the file stays valid JSON.
	"""
	columns = (models.TableColumn(id="a", width=math.nan, min_font_size=math.inf),)
	table = models.TableElement(id="items", x=math.nan, y=10.0, columns=columns, width=math.inf)
	template = models.Template(elements=(table,), id="tpl", footer_reserve_height=math.nan)
	data = template_io.template_to_dict(template)
	element = data["elements"][0]
	assert element["x"] is None
	assert element["y"] == 10.0
	assert element["width"] is None
	assert element["columns"][0]["width"] is None
	assert element["columns"][0]["minFontSize"] is None
	assert data["footerReserveHeight"] is None
	json.dumps(data, allow_nan=False)

	output = tmp_path / "non_finite.json"
	template_io.write_template(output, template)
	reloaded = template_io.load_template(output)
	assert reloaded.elements[0].x == 0.0
	assert reloaded.elements[0].width is None
