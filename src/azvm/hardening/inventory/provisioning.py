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
azvm.hardening.inventory.provisioning - Read the JSON document the
provisioning tool writes with its outputs, e.g.

    {"vm_public_ip": {"sensitive": false, "type": "string", "value": "203.0.113.5"}}
"""
import logging
import ujson as json

from azvm.hardening.inventory import IOFailure, MalformedInput

LOGGER = logging.getLogger(__name__)


def load_provisioning_output(path) -> dict:
    """
    Load the provisioning output document at `path`.

    Raises IOFailure if the file cannot be read and MalformedInput if it is
    not a JSON object.
    """
    LOGGER.info("Reading provisioning output from %s", path)
    try:
        with open(path, 'r', encoding='utf-8') as output_file:
            provisioning_output = json.load(output_file)
    except OSError as err:
        raise IOFailure(
            "Unable to read the provisioning output %s: %s" % (path, err)
        ) from err
    except ValueError as err:
        # JSONDecodeError and UnicodeDecodeError
        raise MalformedInput(
            "Provisioning output %s is not valid JSON: %s" % (path, err)
        ) from err

    if not isinstance(provisioning_output, dict):
        raise MalformedInput(
            "Provisioning output %s must be a JSON object, not %s"
            % (path, type(provisioning_output).__name__)
        )
    LOGGER.debug("Provisioning outputs found: %s", ', '.join(provisioning_output))
    return provisioning_output
