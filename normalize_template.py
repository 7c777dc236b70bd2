#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Convert or normalize a report template's page geometry.
"""

# local repo modules
import report_template_geometry.cli


if __name__ == "__main__":
	report_template_geometry.cli.main()
