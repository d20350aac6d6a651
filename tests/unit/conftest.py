#
# MIT License
#
# (C) Copyright 2026 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
"""
Shared pytest fixtures for azvm-hardening
"""
import json

import pytest

RENDERER_ENV = (
    'PROVISIONING_OUTPUT_FILE',
    'INVENTORY_FILE',
    'INVENTORY_FORMAT',
    'INVENTORY_GROUP',
    'PROVISIONING_OUTPUT_KEY',
    'STARTING_LOG_LEVEL',
)


@pytest.fixture()
def vm_ip():
    return '203.0.113.5'


# Provisioning Test Data
@pytest.fixture()
def provisioning_output(vm_ip):
    """ Return a document shaped like `terraform output -json` """
    return {
        'resource_group_name': {
            'sensitive': False,
            'type': 'string',
            'value': 'rg-hardening',
        },
        'vm_public_ip': {
            'sensitive': False,
            'type': 'string',
            'value': vm_ip,
        },
    }


@pytest.fixture()
def provisioning_output_file(tmp_path, provisioning_output):
    path = tmp_path / 'tf_output.json'
    path.write_text(json.dumps(provisioning_output), encoding='utf-8')
    return path


# Environment Test Data
@pytest.fixture()
def clean_env(monkeypatch):
    """ Remove any renderer configuration inherited from the environment """
    for key in RENDERER_ENV:
        monkeypatch.delenv(key, raising=False)
