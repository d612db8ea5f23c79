#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class InvalidRuleError(Exception):
    pass


class ParseError(Exception):
    pass
