"""
Canvas unit to PDF point coordinate transforms.
"""

# Standard Library
import dataclasses
import math


Y_MODES = ("top", "bottom")
SNAP_MODES = ("stroke", "fill")


#============================================
def safe_scale(numerator: float, denominator: float) -> float:
	"""
	Divide two dimensions, falling back to 1.0 for unusable input.

	Args:
		numerator: Target dimension.
		denominator: Source dimension.

	Returns:
		Scale factor, always finite.
	"""
	if not math.isfinite(numerator) or not math.isfinite(denominator):
		return 1.0
	if denominator <= 0:
		return 1.0
	return numerator / denominator


@dataclasses.dataclass(frozen=True)
class PdfTransform:
	page_width_pt: float
	page_height_pt: float
	canvas_width: float
	canvas_height: float
	scale_x: float
	scale_y: float
	y_mode: str

	def to_pdf_x(self, x: float) -> float:
		return x * self.scale_x

	def to_pdf_w(self, w: float) -> float:
		return w * self.scale_x

	def to_pdf_h(self, h: float) -> float:
		return h * self.scale_y

	def to_pdf_y_top(self, y_top: float) -> float:
		"""
		Output-space position of a box's top edge.
		"""
		if self.y_mode == "top":
			return self.page_height_pt - y_top * self.scale_y
		return y_top * self.scale_y

	def to_pdf_y_box(self, y_top: float, h: float) -> float:
		"""
		Output-space origin (lower-left corner) of a box.
		"""
		if self.y_mode == "top":
			return self.page_height_pt - y_top * self.scale_y - h * self.scale_y
		return y_top * self.scale_y

	def to_pdf_top(self, y_top: float, h: float) -> float:
		"""
		Output-space top edge, given the box height.

		Top mode ignores the height; bottom mode treats y as the lower edge.
		"""
		if self.y_mode == "top":
			return self.page_height_pt - y_top * self.scale_y
		return y_top * self.scale_y + h * self.scale_y

	def to_pdf_rect(self, x: float, y_top: float, w: float, h: float) -> tuple[float, float, float, float]:
		"""
		Convert a canvas box to an output-space (x, y, width, height) rect.
		"""
		return (
			self.to_pdf_x(x),
			self.to_pdf_y_box(y_top, h),
			self.to_pdf_w(w),
			self.to_pdf_h(h),
		)


#============================================
def build_pdf_transform(
	page_width_pt: float,
	page_height_pt: float,
	canvas_width: float,
	canvas_height: float,
	y_mode: str | None = None,
) -> PdfTransform:
	"""
	Build a transform from canvas units to PDF points.

	Args:
		page_width_pt: Output page width in points.
		page_height_pt: Output page height in points.
		canvas_width: Editor canvas width.
		canvas_height: Editor canvas height.
		y_mode: "top" when canvas Y grows downward, "bottom" when it grows
			upward like PDF space. Defaults to "top".

	Returns:
		PdfTransform.
	"""
	resolved_mode = y_mode if y_mode is not None else "top"
	if resolved_mode not in Y_MODES:
		raise ValueError(f"unknown y_mode {resolved_mode!r}, expected one of {Y_MODES}")
	return PdfTransform(
		page_width_pt=page_width_pt,
		page_height_pt=page_height_pt,
		canvas_width=canvas_width,
		canvas_height=canvas_height,
		scale_x=safe_scale(page_width_pt, canvas_width),
		scale_y=safe_scale(page_height_pt, canvas_height),
		y_mode=resolved_mode,
	)


#============================================
def snap_pixel(value: float, mode: str, dpr: float = 1.0) -> float:
	"""
	Snap a canvas coordinate to the device pixel grid.

	Strokes land on pixel centers so one-pixel lines stay crisp; fills land on
	pixel edges.

	Args:
		value: Coordinate in CSS pixels.
		mode: "stroke" or "fill".
		dpr: Device pixel ratio.

	Returns:
		Snapped coordinate.
	"""
	if not math.isfinite(value):
		return value
	scale = dpr if math.isfinite(dpr) and dpr > 0 else 1.0
	if mode == "stroke":
		return (math.floor(value * scale) + 0.5) / scale
	# JS Math.round rounds halves up, unlike Python's banker's rounding
	return math.floor(value * scale + 0.5) / scale
