"""
Packed label/value layout for the document number and date rows.

The block hangs beneath the logo in bottom-origin space: a frame's y is its
lower edge and rows proceed downward from the logo.
"""

# Standard Library
import dataclasses
import math

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.models


Frame = rtg.models.Frame

MIN_HEIGHT_FONT_FACTOR = rtg.config.MIN_HEIGHT_FONT_FACTOR
SIDE_BY_SIDE = "side_by_side"
STACKED = "stacked"


@dataclasses.dataclass(frozen=True)
class MetaFontSizes:
	doc_no_label: float
	doc_no_value: float
	date_label: float
	date_value: float


@dataclasses.dataclass(frozen=True)
class MetaHeights:
	doc_no_label: float | None = None
	doc_no_value: float | None = None
	date_label: float | None = None
	date_value: float | None = None


@dataclasses.dataclass(frozen=True)
class MetaLayoutInput:
	logo_x: float
	logo_y: float
	logo_width: float
	logo_height: float
	gap: float
	label_width: float
	column_gap: float
	row_gap: float
	min_value_width: float
	doc_no_visible: bool
	date_visible: bool
	font_sizes: MetaFontSizes
	heights: MetaHeights | None = None


@dataclasses.dataclass(frozen=True)
class MetaRow:
	label: Frame
	value: Frame
	bottom: float
	mode: str


@dataclasses.dataclass(frozen=True)
class MetaLayoutResult:
	doc_no_label: Frame | None = None
	doc_no_value: Frame | None = None
	date_label: Frame | None = None
	date_value: Frame | None = None
	doc_no_mode: str | None = None
	date_mode: str | None = None

	def is_empty(self) -> bool:
		return self.doc_no_label is None and self.date_label is None


#============================================
def resolve_min_height(
	font_size: float,
	current: float | None = None,
	factor: float = MIN_HEIGHT_FONT_FACTOR,
) -> float:
	"""
	Minimum cell height for a font size, raised to an explicit height.

	Args:
		font_size: Font size in points.
		current: Optional explicit height.
		factor: Line height factor.

	Returns:
		Cell height.
	"""
	raw = font_size * factor
	# non-finite font sizes contribute no minimum
	base = float(math.ceil(raw)) if math.isfinite(raw) else 0.0
	if current is None or not math.isfinite(current):
		return max(0.0, base)
	return max(current, base)


#============================================
def resolve_row_layout(
	top_y: float,
	block_x: float,
	block_w: float,
	label_w: float,
	gap: float,
	min_value_w: float,
	label_h: float,
	value_h: float,
) -> MetaRow:
	"""
	Lay out one label/value row.

	Side by side when the value column keeps at least min_value_w, otherwise
	the label is stacked above the value at full block width.

	Args:
		top_y: Row top edge.
		block_x: Block left edge.
		block_w: Block width.
		label_w: Label column width.
		gap: Gap between label and value.
		min_value_w: Minimum usable value width.
		label_h: Label cell height.
		value_h: Value cell height.

	Returns:
		MetaRow with both frames and the row bottom edge.
	"""
	value_w = max(0.0, block_w - label_w - gap)
	if value_w >= min_value_w:
		row_h = max(label_h, value_h)
		y = top_y - row_h
		return MetaRow(
			label=Frame(x=block_x, y=y, width=label_w, height=row_h),
			value=Frame(x=block_x + label_w + gap, y=y, width=value_w, height=row_h),
			bottom=y,
			mode=SIDE_BY_SIDE,
		)

	label_y = top_y - label_h
	value_y = label_y - gap - value_h
	return MetaRow(
		label=Frame(x=block_x, y=label_y, width=block_w, height=label_h),
		value=Frame(x=block_x, y=value_y, width=block_w, height=value_h),
		bottom=value_y,
		mode=STACKED,
	)


#============================================
def compute_document_meta_layout(layout: MetaLayoutInput) -> MetaLayoutResult:
	"""
	Compute frames for the document number and date rows under the logo.

	Args:
		layout: MetaLayoutInput.

	Returns:
		MetaLayoutResult; empty when no row is visible or the logo anchor is
		not finite.
	"""
	if not layout.doc_no_visible and not layout.date_visible:
		return MetaLayoutResult()
	for value in (layout.logo_x, layout.logo_y, layout.logo_width):
		if not math.isfinite(value):
			return MetaLayoutResult()

	heights = layout.heights if layout.heights is not None else MetaHeights()
	fonts = layout.font_sizes
	block_x = layout.logo_x
	block_w = max(0.0, layout.logo_width)
	label_w = min(layout.label_width, block_w)
	row_top = layout.logo_y - layout.gap

	fields: dict = {}
	if layout.doc_no_visible:
		row = resolve_row_layout(
			row_top,
			block_x,
			block_w,
			label_w,
			layout.column_gap,
			layout.min_value_width,
			resolve_min_height(fonts.doc_no_label, heights.doc_no_label),
			resolve_min_height(fonts.doc_no_value, heights.doc_no_value),
		)
		fields["doc_no_label"] = row.label
		fields["doc_no_value"] = row.value
		fields["doc_no_mode"] = row.mode
		row_top = row.bottom - layout.row_gap

	if layout.date_visible:
		row = resolve_row_layout(
			row_top,
			block_x,
			block_w,
			label_w,
			layout.column_gap,
			layout.min_value_width,
			resolve_min_height(fonts.date_label, heights.date_label),
			resolve_min_height(fonts.date_value, heights.date_value),
		)
		fields["date_label"] = row.label
		fields["date_value"] = row.value
		fields["date_mode"] = row.mode

	return MetaLayoutResult(**fields)


#============================================
def apply_frame_to_element(element: rtg.models.Element, frame: Frame) -> rtg.models.Element:
	"""
	Copy a layout frame onto a text or label element.

	Args:
		element: Text or label element.
		frame: Frame to apply.

	Returns:
		New element with the frame's position and size.
	"""
	if element.type not in ("text", "label"):
		raise ValueError(f"meta frames apply to text or label elements, got {element.type!r}")
	return dataclasses.replace(
		element,
		x=frame.x,
		y=frame.y,
		width=frame.width,
		height=frame.height,
	)
