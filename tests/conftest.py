"""
Pytest configuration for local imports and shared template fixtures.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()


#============================================
@pytest.fixture
def page_table() -> dict[str, tuple[float, float]]:
	"""
	Rounded A4 and Letter portrait sizes in points.
	"""
	return {
		"A4": (595.0, 842.0),
		"Letter": (612.0, 792.0),
	}


#============================================
@pytest.fixture
def sample_template_data() -> dict:
	"""
	A small quote template in its stored JSON shape.
	"""
	return {
		"id": "template_001",
		"name": "Standard quote",
		"pageSize": "A4",
		"orientation": "portrait",
		"elements": [
			{
				"id": "title",
				"type": "label",
				"x": 50,
				"y": 50,
				"fontSize": 24,
				"fontWeight": "bold",
				"text": "Quote",
				"region": "header",
			},
			{
				"id": "customer_name",
				"type": "text",
				"x": 90,
				"y": 100,
				"width": 200,
				"height": 20,
				"fontSize": 12,
				"dataSource": {"type": "kintone", "fieldCode": "CustomerName"},
			},
			{
				"id": "items",
				"type": "table",
				"x": 50,
				"y": 300,
				"width": 520,
				"rowHeight": 20,
				"headerHeight": 24,
				"dataSource": {"type": "kintoneSubtable", "fieldCode": "Items"},
				"columns": [
					{"id": "item_name", "title": "Item", "fieldCode": "ItemName", "width": 220},
					{"id": "qty", "title": "Qty", "fieldCode": "Qty", "width": 80, "align": "right"},
					{"id": "unit_price", "title": "Price", "fieldCode": "UnitPrice", "width": 100, "minFontSize": 8},
					{"id": "amount", "title": "Amount", "fieldCode": "Amount", "width": 120},
				],
				"summary": {
					"mode": "lastPageOnly",
					"style": {"totalTopBorderWidth": 1.2, "borderColorGray": 0.3},
				},
				"showGrid": True,
			},
			{
				"id": "logo",
				"type": "image",
				"x": 440,
				"y": 40,
				"width": 120,
				"height": 60,
				"region": "header",
				"dataSource": {"type": "static", "value": "logo.png"},
			},
		],
		"sampleData": {"CustomerName": "Sample Co."},
	}
