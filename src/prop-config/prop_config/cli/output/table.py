"""Rich rendering of a configuration snapshot."""

from rich.table import Table

from prop_config.dynamic.domain.snapshot import Snapshot


def build_snapshot_table(snapshot: Snapshot, prefix: str | None = None) -> Table:
    """Return a two-column key/value table, sorted by key.

    When ``prefix`` is given only keys starting with it are included.
    """
    table = Table(title=f"{snapshot.source} (version {snapshot.version})")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")

    for key in sorted(snapshot.entries):
        if prefix and not key.startswith(prefix):
            continue
        table.add_row(key, snapshot.entries[key])
    return table
