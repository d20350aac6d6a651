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
azvm.hardening.inventory - Base class, factory and errors for rendering the
Ansible inventory of freshly provisioned Azure VMs from the provisioning
tool's JSON output.

HT: https://realpython.com/factory-method-python/
"""
from collections import defaultdict
import logging
import os
from pathlib import Path
import stat
import tempfile
from typing import Dict, List

LOGGER = logging.getLogger(__name__)


class InventoryError(Exception):
    """
    A generic error for inventory rendering
    """
    pass


class MissingField(InventoryError):
    """ The provisioning output lacks the key path holding the host address """
    pass


class MalformedInput(InventoryError):
    """ The provisioning output is not the structured document we expect """
    pass


class IOFailure(InventoryError):
    """ The provisioning output could not be read or the inventory written """
    pass


class InventoryConfigError(InventoryError):
    """ The renderer was asked for something it does not know how to do """
    pass


def host_addresses(provisioning_output: dict, output_key: str) -> List[str]:
    """
    Return the host addresses stored under `output_key` in the provisioning
    output, in order.

    The value is either a single address string or a list of them. A missing
    key or an empty value raises MissingField; nothing is ever made up in
    their place. A value of the wrong type raises MalformedInput.
    """
    try:
        record = provisioning_output[output_key]
    except KeyError:
        raise MissingField(
            "Provisioning output has no %r entry" % output_key
        ) from None

    if not isinstance(record, dict):
        raise MalformedInput(
            "Provisioning output entry %r is not an object: %r" % (output_key, record)
        )
    if 'value' not in record:
        raise MissingField("Provisioning output has no '%s.value' entry" % output_key)

    value = record['value']
    if isinstance(value, str):
        values = [value]
    elif isinstance(value, list) and all(isinstance(item, str) for item in value):
        values = value
    else:
        raise MalformedInput(
            "'%s.value' must be an address or a list of addresses, got %r" % (output_key, value)
        )

    addresses = [item.strip() for item in values]
    if not addresses or not all(addresses):
        raise MissingField("'%s.value' does not hold a host address" % output_key)
    for address in addresses:
        # One host per inventory line
        if any(char.isspace() for char in address):
            raise MalformedInput(
                "'%s.value' holds an invalid host address %r" % (output_key, address)
            )
        try:
            address.encode('utf-8')
        except UnicodeEncodeError as err:
            raise MalformedInput(
                "'%s.value' holds an address that is not valid text %r" % (output_key, address)
            ) from err
    return addresses


class InventoryFactory(object):
    """
    Factory for classes that render inventories
    """
    def __init__(self):
        self._generators = {}

    def register(self, key, generator):
        """ Register a generator with the factory """
        self._generators[key] = generator

    def create(self, key, provisioning_output, **kwargs):
        """ Instantiate and return an inventory generator """
        generator = self._generators.get(key)
        if not generator:
            raise ValueError(key)
        return generator(provisioning_output, **kwargs)


class InventoryBase(object):
    """ Base class for inventory generators """
    inventory_file = "inventory.ini"
    group = "azure_vms"
    output_key = "vm_public_ip"

    def __init__(self, provisioning_output, inventory_file=None, group=None, output_key=None):
        self.provisioning_output = provisioning_output
        self.inventory_file = inventory_file or self.inventory_file
        self.group = group or self.group
        self.output_key = output_key or self.output_key

    def get_groups_members(self) -> Dict[str, List[str]]:
        """
        Returns a dictionary of group names and the list of host addresses
        that belong to them, in the order they should be written.
        """
        groups_members = defaultdict(list)
        groups_members[self.group].extend(
            host_addresses(self.provisioning_output, self.output_key)
        )

        LOGGER.debug(
            "Groups/members retrieved from %r: %s", self.output_key, dict(groups_members)
        )
        return dict(groups_members)

    def generate(self) -> Dict[str, List[str]]:
        """ Generate the inventory and return it """
        inventory = self.get_groups_members()
        LOGGER.info(
            "Inventory generated with %d group(s) and %d host(s)",
            len(inventory), sum(len(members) for members in inventory.values())
        )
        return inventory

    def render(self, inventory: Dict[str, List[str]]) -> str:
        """ Return the inventory file contents for `inventory` """
        raise NotImplementedError

    def write(self, inventory=None):
        """
        Render the inventory and replace the inventory file with it.

        The contents are rendered before the file is touched and then moved
        into place from a temporary file in the same directory, so a failure
        at any point leaves an existing inventory file as it was.
        """
        if inventory is None:
            inventory = self.generate()
        contents = self.render(inventory)

        LOGGER.info("Writing out the inventory to %s", self.inventory_file)
        target = Path(self.inventory_file)
        tmp_name = None
        replaced = False
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                    'w', encoding='utf-8', newline='\n', dir=str(target.parent),
                    prefix='.%s.' % target.name, delete=False) as tmp_file:
                tmp_name = tmp_file.name
                tmp_file.write(contents)
            os.chmod(tmp_name, self._file_mode(target))
            os.replace(tmp_name, str(target))
            replaced = True
        except (OSError, UnicodeError) as err:
            raise IOFailure(
                "Unable to write the inventory to %s: %s" % (target, err)
            ) from err
        finally:
            if not replaced and tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    @staticmethod
    def _file_mode(target: Path) -> int:
        """
        Mode for the new inventory file: that of the file it replaces, else
        what a plain open() would give it under the current umask.
        """
        try:
            return stat.S_IMODE(target.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
