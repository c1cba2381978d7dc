"""
recordui kernel test configuration.

Kernel tests are synchronous and need no services. Shared record text
lives here.
"""

import pytest

from recordui.kernel.parser import parse_record_text

ACCOUNT_TEXT = """\
Acme Corporation

* Id: 001xx000003DGb2AAG
* Name: Acme Corporation
* Industry: Manufacturing
* Annual Revenue: $4,500,000
* Website: https://acme.test
"""


@pytest.fixture
def account():
    return parse_record_text(ACCOUNT_TEXT)


@pytest.fixture
def account_text():
    return ACCOUNT_TEXT
