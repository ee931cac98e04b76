"""Offline snaps: download for later, install from the download directory.

``snap download`` writes ``<name>_<rev>.snap`` and ``<name>_<rev>.assert``
side by side. The install flow acknowledges the assertion that shares
the archive's stem before installing the archive.
"""

import logging
from pathlib import Path

from snapman.core.formatter import name_choices
from snapman.core.paths import ensure_download_dir
from snapman.menus.context import MenuContext, report_batch, run_submenu
from snapman.models.action import ActionResult
from snapman.models.choice import Choice

logger = logging.getLogger(__name__)


def list_snap_files(directory: Path) -> list[str]:
    """List ``.snap`` archive names in a directory.

    Args:
        directory: Download directory.

    Returns:
        Sorted file names, empty if the directory does not exist.
    """
    if not directory.is_dir():
        return []
    return sorted(p.name for p in directory.glob("*.snap") if p.is_file())


def assertion_for(snap_file: Path) -> Path:
    """Return the assertion file that belongs to a snap archive."""
    return snap_file.with_suffix(".assert")


def download_snaps(ctx: MenuContext) -> None:
    """Download selected installed snaps into the download directory."""
    ctx.ui.title("Download Installed Snaps for Offline Use")

    names = ctx.client.installed_names()
    if not names:
        ctx.ui.style("No snaps are currently installed.")
        ctx.ui.wait_for_input()
        return

    selected = ctx.ui.filter_many("Select snaps to download for offline use:", name_choices(names))
    if not selected:
        return

    target_dir = ensure_download_dir(ctx.config.download_dir)

    ctx.operator.authenticate()
    results: list[ActionResult] = [ctx.operator.download(name, target_dir) for name in selected]
    report_batch(ctx, results, f"All selected snaps downloaded to {target_dir}")


def install_offline_snaps(ctx: MenuContext) -> None:
    """Install selected archives from the download directory.

    A missing assertion is reported as a warning; the archive is still
    installed.
    """
    ctx.ui.title("Install Downloaded Snaps")

    target_dir = ctx.config.download_dir
    if not target_dir.is_dir():
        ctx.ui.style(f"No downloaded snaps found in {target_dir}.")
        ctx.ui.wait_for_input()
        return

    snap_files = list_snap_files(target_dir)
    if not snap_files:
        ctx.ui.style(f"No .snap files found in {target_dir}.")
        ctx.ui.wait_for_input()
        return

    selected = ctx.ui.filter_many("Select snaps to install:", name_choices(snap_files))
    if not selected:
        return

    ctx.operator.authenticate()

    results: list[ActionResult] = []
    for file_name in selected:
        snap_file = target_dir / file_name
        assert_file = assertion_for(snap_file)

        if assert_file.is_file():
            results.append(ctx.operator.ack(assert_file))
        else:
            logger.warning("No assertion for %s", snap_file)
            ctx.ui.console.print(
                f"[warning]Warning: No assertion file found for {snap_file.stem}, skipping ack.[/]"
            )

        results.append(ctx.operator.install_file(snap_file))

    report_batch(ctx, results, f"All selected snaps installed from {target_dir}")


def manage_offline(ctx: MenuContext) -> None:
    """Offline snaps sub-menu."""
    run_submenu(
        ctx,
        "Manage Offline Snaps",
        "Offline snap options:",
        [
            Choice("Download snaps for offline use", download_snaps),
            Choice("Install offline snaps", install_offline_snaps),
        ],
    )
