"""
Immutable template and element value types.

Elements form a tagged union on the "type" field. Each variant is its own
dataclass; handlers dispatch on element.type instead of sharing a base class.
"""

# Standard Library
import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class TableColumn:
	id: str
	width: float
	min_font_size: float | None = None
	extra: dict = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class TableSummaryStyle:
	total_top_border_width: float | None = None
	extra: dict = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class TableSummary:
	style: TableSummaryStyle | None = None
	extra: dict = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class TextElement:
	id: str
	x: float
	y: float
	width: float | None = None
	height: float | None = None
	font_size: float | None = None
	border_width: float | None = None
	corner_radius: float | None = None
	region: str | None = None
	extra: dict = dataclasses.field(default_factory=dict)
	type: str = "text"


@dataclasses.dataclass(frozen=True)
class LabelElement:
	id: str
	x: float
	y: float
	width: float | None = None
	height: float | None = None
	font_size: float | None = None
	border_width: float | None = None
	corner_radius: float | None = None
	region: str | None = None
	extra: dict = dataclasses.field(default_factory=dict)
	type: str = "label"


@dataclasses.dataclass(frozen=True)
class TableElement:
	id: str
	x: float
	y: float
	columns: tuple[TableColumn, ...] = ()
	width: float | None = None
	height: float | None = None
	row_height: float | None = None
	header_height: float | None = None
	summary: TableSummary | None = None
	border_width: float | None = None
	corner_radius: float | None = None
	region: str | None = None
	extra: dict = dataclasses.field(default_factory=dict)
	type: str = "table"


@dataclasses.dataclass(frozen=True)
class CardListElement:
	id: str
	x: float
	y: float
	card_height: float = 90.0
	width: float | None = None
	height: float | None = None
	gap_y: float | None = None
	padding: float | None = None
	border_width: float | None = None
	corner_radius: float | None = None
	region: str | None = None
	extra: dict = dataclasses.field(default_factory=dict)
	type: str = "cardList"


@dataclasses.dataclass(frozen=True)
class ImageElement:
	id: str
	x: float
	y: float
	width: float | None = None
	height: float | None = None
	border_width: float | None = None
	corner_radius: float | None = None
	region: str | None = None
	extra: dict = dataclasses.field(default_factory=dict)
	type: str = "image"


@dataclasses.dataclass(frozen=True)
class GenericElement:
	"""
	Element of a type this engine does not know; only base fields are scaled.
	"""
	id: str
	type: str
	x: float
	y: float
	width: float | None = None
	height: float | None = None
	border_width: float | None = None
	corner_radius: float | None = None
	region: str | None = None
	extra: dict = dataclasses.field(default_factory=dict)


Element = typing.Union[
	TextElement,
	LabelElement,
	TableElement,
	CardListElement,
	ImageElement,
	GenericElement,
]


@dataclasses.dataclass(frozen=True)
class RegionSpan:
	y_top: float
	y_bottom: float


@dataclasses.dataclass(frozen=True)
class RegionBounds:
	header: RegionSpan
	body: RegionSpan
	footer: RegionSpan

	def spans(self) -> dict[str, RegionSpan]:
		return {"header": self.header, "body": self.body, "footer": self.footer}


@dataclasses.dataclass(frozen=True)
class Template:
	elements: tuple[Element, ...] = ()
	page_size: str = "A4"
	orientation: str = "portrait"
	region_bounds: RegionBounds | None = None
	footer_reserve_height: float | None = None
	structure_type: str | None = None
	id: str = ""
	extra: dict = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class Scale:
	sx: float
	sy: float
	s_min: float


@dataclasses.dataclass(frozen=True)
class Frame:
	x: float
	y: float
	width: float
	height: float
