"""stats storage | stats inventory"""
from kitchen.shell.router import CommandRouter, require_storage
from kitchen.utilities.constants import ValidCommand
from kitchen.utilities.statistics import InventoryStats, StorageStats

router = CommandRouter(ValidCommand.STATS)


@router.subcommand("storage")
def storage_stats(session, command_input):
    storage = require_storage(session, "show stats for")
    if storage is None:
        return
    stats = StorageStats(storage)
    session.output.print_stats(f"Statistics for {storage.storage_name}:", stats.summary())
    expiring = stats.expiring_soon()
    if expiring:
        session.output.print_list("Expiring soon:", (
            f"{item['name']} - {item['amount']:g} {item['unit']} - {item['days_left']} day(s) left"
            for item in expiring
        ))


@router.subcommand("inventory", "all")
def inventory_stats(session, command_input):
    stats = InventoryStats(session.inventory)
    session.output.print_stats("Statistics for all storages:", stats.summary())
    for name, summary in stats.per_storage().items():
        session.output.print_stats(f"{name}:", summary)
