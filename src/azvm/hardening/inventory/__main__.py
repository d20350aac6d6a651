#!/usr/bin/env python
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
Inventory Renderer - turn the provisioning tool's JSON output into the
inventory the hardening playbook is run against.

Run from the directory holding the provisioning output:

    terraform output -json > tf_output.json
    python -m azvm.hardening.inventory
    ansible-playbook -i inventory.ini hardening.yml
"""
from importlib.metadata import PackageNotFoundError, version
import logging
import os
import sys

from azvm.hardening.inventory import InventoryConfigError, InventoryError, InventoryFactory
from azvm.hardening.inventory.ini import IniInventory
from azvm.hardening.inventory.provisioning import load_provisioning_output
from azvm.hardening.inventory.yamlfile import YamlInventory
from azvm.hardening.logging import setup_logging

LOGGER = logging.getLogger('azvm.hardening.inventory')
PROVISIONING_OUTPUT_FILE = "tf_output.json"
DEFAULT_INVENTORY_FORMAT = "ini"


def _get_version():
    try:
        return version('azvm-hardening')
    except PackageNotFoundError:
        return 'unknown'


def main():
    provisioning_output_file = (
        os.environ.get('PROVISIONING_OUTPUT_FILE') or PROVISIONING_OUTPUT_FILE
    )
    inventory_format = (os.environ.get('INVENTORY_FORMAT') or DEFAULT_INVENTORY_FORMAT).lower()
    LOGGER.info(
        'Starting inventory renderer version=%s, format=%s', _get_version(), inventory_format
    )

    factory = InventoryFactory()
    factory.register('ini', IniInventory)
    factory.register('yaml', YamlInventory)

    try:
        provisioning_output = load_provisioning_output(provisioning_output_file)
        try:
            inventory_generator = factory.create(
                inventory_format,
                provisioning_output,
                inventory_file=os.environ.get('INVENTORY_FILE'),
                group=os.environ.get('INVENTORY_GROUP'),
                output_key=os.environ.get('PROVISIONING_OUTPUT_KEY'),
            )
        except ValueError as err:
            LOGGER.error("%s is not a valid inventory format.", inventory_format)
            raise InventoryConfigError('Inventory rendering failed') from err

        inventory_generator.write(inventory=inventory_generator.generate())
    except InventoryError as err:
        LOGGER.error(
            "An error occurred while attempting to render the inventory. "
            "Error: %s", err
        )
        raise
    except Exception as err:
        LOGGER.error("An unknown exception occurred: %s", err)
        raise

    LOGGER.info("Inventory written to %s", inventory_generator.inventory_file)
    return 0


def run():
    setup_logging()
    exit_code = 0
    try:
        exit_code = main()
    except Exception:
        exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(run())
