"""
Plain-data (JSON shaped) conversion for templates and elements.

Templates are stored with camelCase keys. Keys this engine does not own are
kept in each value's "extra" dict and written back unchanged.
"""

# Standard Library
import json
import math
import pathlib

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.models


Template = rtg.models.Template
RegionBounds = rtg.models.RegionBounds
RegionSpan = rtg.models.RegionSpan
TableColumn = rtg.models.TableColumn
TableSummary = rtg.models.TableSummary
TableSummaryStyle = rtg.models.TableSummaryStyle

DEFAULT_PAGE_SIZE = rtg.config.DEFAULT_PAGE_SIZE
DEFAULT_ORIENTATION = rtg.config.DEFAULT_ORIENTATION
DEFAULT_CARD_HEIGHT = rtg.config.DEFAULT_CARD_HEIGHT

BASE_KEYS = {
	"id": "id",
	"type": "type",
	"x": "x",
	"y": "y",
	"width": "width",
	"height": "height",
	"borderWidth": "border_width",
	"cornerRadius": "corner_radius",
	"region": "region",
}
VARIANT_KEYS = {
	"text": {"fontSize": "font_size"},
	"label": {"fontSize": "font_size"},
	"table": {"rowHeight": "row_height", "headerHeight": "header_height"},
	"cardList": {"cardHeight": "card_height", "gapY": "gap_y", "padding": "padding"},
	"image": {},
}
VARIANT_CLASSES = {
	"text": rtg.models.TextElement,
	"label": rtg.models.LabelElement,
	"table": rtg.models.TableElement,
	"cardList": rtg.models.CardListElement,
	"image": rtg.models.ImageElement,
}
TEMPLATE_KEYS = (
	"id",
	"pageSize",
	"orientation",
	"elements",
	"regionBounds",
	"footerReserveHeight",
	"structureType",
)
REGION_NAMES = ("header", "body", "footer")


#============================================
def read_number(value: object) -> float | None:
	"""
	Read an optional numeric value.

	Args:
		value: Raw JSON value.

	Returns:
		Float value, or None when the value is not a number.
	"""
	if isinstance(value, bool):
		return None
	if isinstance(value, (int, float)):
		return float(value)
	return None


#============================================
def write_number(value: float | None) -> float | None:
	"""
	Write a numeric value, mapping non-finite floats to JSON null.
	"""
	if value is None or not math.isfinite(value):
		return None
	return value


#============================================
def column_from_dict(data: dict) -> TableColumn:
	"""
	Build a TableColumn from plain data.

	Args:
		data: Column dict.

	Returns:
		TableColumn.
	"""
	if not isinstance(data, dict):
		raise ValueError(f"table column must be an object, got {type(data).__name__}")
	width = read_number(data.get("width"))
	extra = {key: value for key, value in data.items() if key not in ("id", "width", "minFontSize")}
	return TableColumn(
		id=str(data.get("id", "")),
		width=width if width is not None else 0.0,
		min_font_size=read_number(data.get("minFontSize")),
		extra=extra,
	)


#============================================
def summary_from_dict(data: dict | None) -> TableSummary | None:
	"""
	Build a TableSummary from plain data.
	"""
	if not isinstance(data, dict):
		return None
	style = None
	raw_style = data.get("style")
	if isinstance(raw_style, dict):
		style_extra = {key: value for key, value in raw_style.items() if key != "totalTopBorderWidth"}
		style = TableSummaryStyle(
			total_top_border_width=read_number(raw_style.get("totalTopBorderWidth")),
			extra=style_extra,
		)
	extra = {key: value for key, value in data.items() if key != "style"}
	return TableSummary(style=style, extra=extra)


#============================================
def element_from_dict(data: dict) -> rtg.models.Element:
	"""
	Build an element from plain data, dispatching on its "type" field.

	Args:
		data: Element dict.

	Returns:
		Element dataclass instance.
	"""
	if not isinstance(data, dict):
		raise ValueError(f"element must be an object, got {type(data).__name__}")
	element_type = str(data.get("type", ""))
	variant_keys = VARIANT_KEYS.get(element_type, {})
	known_keys = set(BASE_KEYS) | set(variant_keys)
	if element_type == "table":
		known_keys |= {"columns", "summary"}

	fields: dict = {
		"id": str(data.get("id", "")),
		"x": read_number(data.get("x")) or 0.0,
		"y": read_number(data.get("y")) or 0.0,
		"width": read_number(data.get("width")),
		"height": read_number(data.get("height")),
		"border_width": read_number(data.get("borderWidth")),
		"corner_radius": read_number(data.get("cornerRadius")),
		"region": data.get("region"),
		"extra": {key: value for key, value in data.items() if key not in known_keys},
	}
	for json_key, field_name in variant_keys.items():
		fields[field_name] = read_number(data.get(json_key))

	if element_type == "table":
		raw_columns = data.get("columns", [])
		if not isinstance(raw_columns, list):
			raise ValueError(f"table {fields['id']!r} columns must be a list")
		fields["columns"] = tuple(column_from_dict(column) for column in raw_columns)
		fields["summary"] = summary_from_dict(data.get("summary"))
	if element_type == "cardList" and fields["card_height"] is None:
		fields["card_height"] = DEFAULT_CARD_HEIGHT

	element_class = VARIANT_CLASSES.get(element_type)
	if element_class is None:
		return rtg.models.GenericElement(type=element_type, **fields)
	return element_class(**fields)


#============================================
def element_to_dict(element: rtg.models.Element) -> dict:
	"""
	Convert an element back to plain data.

	Args:
		element: Element dataclass instance.

	Returns:
		Element dict with camelCase keys.
	"""
	data = dict(element.extra)
	data["id"] = element.id
	data["type"] = element.type
	data["x"] = write_number(element.x)
	data["y"] = write_number(element.y)
	keys = dict(BASE_KEYS)
	keys.update(VARIANT_KEYS.get(element.type, {}))
	for json_key, field_name in keys.items():
		if json_key in ("id", "type", "x", "y", "region"):
			continue
		value = getattr(element, field_name, None)
		if value is not None:
			data[json_key] = write_number(value)
	if element.region is not None:
		data["region"] = element.region

	if element.type == "table":
		columns = []
		for column in element.columns:
			column_data = dict(column.extra)
			column_data["id"] = column.id
			column_data["width"] = write_number(column.width)
			if column.min_font_size is not None:
				column_data["minFontSize"] = write_number(column.min_font_size)
			columns.append(column_data)
		data["columns"] = columns
		if element.summary is not None:
			summary_data = dict(element.summary.extra)
			style = element.summary.style
			if style is not None:
				style_data = dict(style.extra)
				if style.total_top_border_width is not None:
					style_data["totalTopBorderWidth"] = write_number(style.total_top_border_width)
				summary_data["style"] = style_data
			data["summary"] = summary_data
	return data


#============================================
def region_bounds_from_dict(data: dict | None) -> RegionBounds | None:
	"""
	Build RegionBounds from plain data.

	Missing or non-numeric edges become NaN so the region resolver can
	substitute its defaults.
	"""
	if not isinstance(data, dict):
		return None
	spans = {}
	for name in REGION_NAMES:
		raw = data.get(name)
		if not isinstance(raw, dict):
			raw = {}
		y_top = read_number(raw.get("yTop"))
		y_bottom = read_number(raw.get("yBottom"))
		spans[name] = RegionSpan(
			y_top=y_top if y_top is not None else math.nan,
			y_bottom=y_bottom if y_bottom is not None else math.nan,
		)
	return RegionBounds(**spans)


#============================================
def region_bounds_to_dict(bounds: RegionBounds) -> dict:
	"""
	Convert RegionBounds to plain data.
	"""
	data = {}
	for name, span in bounds.spans().items():
		data[name] = {
			"yTop": write_number(span.y_top),
			"yBottom": write_number(span.y_bottom),
		}
	return data


#============================================
def template_from_dict(data: dict) -> Template:
	"""
	Build a Template from plain data.

	Args:
		data: Template dict, as loaded from JSON.

	Returns:
		Template.
	"""
	if not isinstance(data, dict):
		raise ValueError(f"template must be an object, got {type(data).__name__}")
	raw_elements = data.get("elements", [])
	if not isinstance(raw_elements, list):
		raise ValueError("template elements must be a list")
	elements = tuple(element_from_dict(item) for item in raw_elements)
	extra = {key: value for key, value in data.items() if key not in TEMPLATE_KEYS}
	structure_type = data.get("structureType")
	return Template(
		elements=elements,
		page_size=str(data.get("pageSize") or DEFAULT_PAGE_SIZE),
		orientation=str(data.get("orientation") or DEFAULT_ORIENTATION),
		region_bounds=region_bounds_from_dict(data.get("regionBounds")),
		footer_reserve_height=read_number(data.get("footerReserveHeight")),
		structure_type=str(structure_type) if structure_type is not None else None,
		id=str(data.get("id", "")),
		extra=extra,
	)


#============================================
def template_to_dict(template: Template) -> dict:
	"""
	Convert a Template to plain data.

	Args:
		template: Template value.

	Returns:
		Template dict with camelCase keys.
	"""
	data = dict(template.extra)
	data["id"] = template.id
	data["pageSize"] = template.page_size
	data["orientation"] = template.orientation
	data["elements"] = [element_to_dict(element) for element in template.elements]
	if template.region_bounds is not None:
		data["regionBounds"] = region_bounds_to_dict(template.region_bounds)
	if template.footer_reserve_height is not None:
		data["footerReserveHeight"] = write_number(template.footer_reserve_height)
	if template.structure_type is not None:
		data["structureType"] = template.structure_type
	return data


#============================================
def load_template(path: pathlib.Path) -> Template:
	"""
	Load a template JSON file.

	Args:
		path: JSON path.

	Returns:
		Template.
	"""
	text = path.read_text(encoding="utf-8")
	return template_from_dict(json.loads(text))


#============================================
def write_template(path: pathlib.Path, template: Template) -> None:
	"""
	Write a template JSON file.

	Args:
		path: Output path.
		template: Template value.
	"""
	text = json.dumps(
		template_to_dict(template),
		indent=2,
		sort_keys=True,
		ensure_ascii=False,
		allow_nan=False,
	)
	path.write_text(text + "\n", encoding="utf-8")
