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
azvm.hardening.inventory.ini - Render the inventory in Ansible's INI format
from the template shipped with this package.
"""
import logging

from jinja2 import Environment, PackageLoader, StrictUndefined

from azvm.hardening.inventory import InventoryBase

LOGGER = logging.getLogger(__name__)


class IniInventory(InventoryBase):
    """
    Inventory class to render one `[group]` section per group with one host
    address per line. The template only lays out what it is given; all
    parsing happens before it is rendered.
    """
    inventory_file = "inventory.ini"
    template_name = "inventory.ini.j2"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.env = Environment(
            loader=PackageLoader('azvm.hardening.inventory', 'templates'),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, inventory):
        LOGGER.debug("Rendering inventory with template %s", self.template_name)
        template = self.env.get_template(self.template_name)
        return template.render(groups=inventory)
