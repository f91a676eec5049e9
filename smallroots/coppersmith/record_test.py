#  Copyright 2025 Google LLC
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import logging

import pytest

from smallroots import coppersmith
from smallroots.coppersmith import test_utils as tu


@pytest.mark.parametrize(
    "text",
    [
        "123,45,6,7",
        "  123 , 45,6 ,7\nthis line is ignored",
        "123,45,,6,7,",
        "\t123,\t+45,6,7\r\n",
    ],
)
def test_parse_record(text):
    assert coppersmith.parse_record(text) == coppersmith.AttackRecord(123, 45, 6, 7)


def test_parse_negative():
    assert coppersmith.parse_record("10,3,-4,5").p0 == -4


@pytest.mark.parametrize(
    "text", ["", "\n1,2,3,4", "1,2,3", "1,2,3,4,5", "1,2,x,4", "1,2,3.5,4", "1 2,3,4,5", "0x10,1,2,3"]
)
def test_parse_malformed(text):
    with pytest.raises(coppersmith.ConfigurationError):
        coppersmith.parse_record(text)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        coppersmith.parse_record("1,2")


def test_parse_logs_digit_counts(caplog):
    caplog.set_level(logging.INFO)
    coppersmith.parse_record("12345,45,6,-7")
    assert "n: 5 digits" in caplog.text
    assert "X: 1 digits" in caplog.text


def test_read_record(tmp_path):
    record = tu.make_record()
    path = tmp_path / "record.txt"
    path.write_text(tu.record_text(record))
    assert coppersmith.read_record(path) == record
    assert coppersmith.read_record(str(path)) == record


def test_read_missing_record(tmp_path):
    with pytest.raises(coppersmith.ConfigurationError, match="Could not open file"):
        coppersmith.read_record(tmp_path / "missing.txt")
