# Copyright 2026, Hewlett Packard Enterprise Development LP
""" Test the azvm/hardening/inventory/ini.py module """
from azvm.hardening.inventory.ini import IniInventory


def test_render_single_host(provisioning_output, vm_ip):
    generator = IniInventory(provisioning_output)
    assert generator.render(generator.generate()) == '[azure_vms]\n%s\n' % vm_ip


def test_render_groups_in_order():
    generator = IniInventory({})
    inventory = {
        'azure_vms': ['203.0.113.5', '203.0.113.9'],
        'bastion': ['bastion.example.com'],
    }
    assert generator.render(inventory) == (
        '[azure_vms]\n'
        '203.0.113.5\n'
        '203.0.113.9\n'
        '[bastion]\n'
        'bastion.example.com\n'
    )


def test_write(tmp_path, provisioning_output, vm_ip):
    """ The file holds exactly the group header and the host """
    inventory_file = tmp_path / 'inventory.ini'
    IniInventory(provisioning_output, inventory_file=str(inventory_file)).write()
    assert inventory_file.read_text().splitlines() == ['[azure_vms]', vm_ip]


def test_write_idempotent(tmp_path, provisioning_output):
    inventory_file = tmp_path / 'inventory.ini'
    IniInventory(provisioning_output, inventory_file=str(inventory_file)).write()
    first = inventory_file.read_bytes()
    IniInventory(provisioning_output, inventory_file=str(inventory_file)).write()
    assert inventory_file.read_bytes() == first


def test_write_list_value(tmp_path):
    output = {'vm_public_ip': {'value': ['198.51.100.7', '198.51.100.2']}}
    inventory_file = tmp_path / 'inventory.ini'
    IniInventory(output, inventory_file=str(inventory_file)).write()
    assert inventory_file.read_text() == '[azure_vms]\n198.51.100.7\n198.51.100.2\n'
