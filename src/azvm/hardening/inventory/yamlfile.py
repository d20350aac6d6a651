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
azvm.hardening.inventory.yamlfile - Render the inventory in the layout
Ansible's YAML inventory plugin reads.
"""
from typing import Dict, Iterable

from yaml import safe_dump

from azvm.hardening.inventory import InventoryBase


class YamlInventory(InventoryBase):
    inventory_file = "inventory.yaml"

    def _dict2AnsibleInventory(self, grp_members: Dict[str, Iterable]):
        """
        Convert a dictionary of {'group': [members, ]} to the format that
        Ansible requires for its YAML parser plugin
        """
        inventory = {}
        for group, members in grp_members.items():
            inventory[group] = {'hosts': {member: {} for member in members}}
        return inventory

    def render(self, inventory):
        return safe_dump(
            self._dict2AnsibleInventory(inventory), default_flow_style=False, indent=2,
            sort_keys=False
        )
