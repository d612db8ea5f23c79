#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
DEFAULT_MAX_DATES = 100
DEFAULT_PREVIEW_COUNT = 5
DEFAULT_MAX_PREVIEW_DATES = 10
ITERATION_CAP_MULTIPLIER = 10
"""Number of rule periods scanned per requested occurrence before giving up."""
MAX_SCAN_DAYS = 146_097
"""Days in one 400 year Gregorian cycle, after which every calendar repeats."""
DAYS_IN_WEEK = 7
MAX_WEEK_OF_MONTH = 4
LAST_WEEK_OF_MONTH = -1
