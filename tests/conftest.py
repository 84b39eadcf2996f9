"""
Shared fixtures for uidump-parser tests.
"""

import pytest

from uidump_parser.document import parse_document

SAMPLE_DUMP = b"""<?xml version='1.0' encoding='UTF-8' standalone='yes' ?>
<hierarchy rotation="0">
  <node index="0" text="" resource-id="" class="android.widget.FrameLayout" package="com.example" content-desc="" enabled="true" bounds="[0,0][1080,2400]">
    <node index="0" text="Instagram" resource-id="com.example:id/title" class="android.widget.TextView" package="com.example" content-desc="" enabled="true" bounds="[0,63][540,210]" />
    <node index="1" text="Grindr" resource-id="com.example:id/title" class="android.widget.TextView" package="com.example" content-desc="" enabled="false" bounds="[540,63][1080,210]" />
    <node index="2" text="" resource-id="com.example:id/list" class="android.widget.LinearLayout" package="com.example" content-desc="apps" enabled="true" bounds="[0,210][1080,2400]">
      <node index="0" text="Instagram" resource-id="com.example:id/item" class="android.widget.TextView" package="com.other" content-desc="" enabled="true" bounds="[0,210][1080,400]" />
    </node>
  </node>
</hierarchy>
"""


@pytest.fixture
def sample_root():
    """Parsed sample UI dump root element."""
    return parse_document(SAMPLE_DUMP)


@pytest.fixture
def sample_file(tmp_path):
    """Sample UI dump written to a temporary file."""
    path = tmp_path / "dump.xml"
    path.write_bytes(SAMPLE_DUMP)
    return path
