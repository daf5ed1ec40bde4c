##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Manages formatting for displaying composition results.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List

from tabulate import tabulate

from mixkit.bundle import BehaviorBundle
from mixkit.composer import as_bundles, describe_target, operation_of


def winning_bundles(bundles: Iterable[Mapping]) -> Dict[str, BehaviorBundle]:
    """
    Map each operation name to the last bundle that defines it.

    Args:
        bundles: The bundles in composition order.

    Returns:
        A dict mapping operation names to bundles.
    """
    winners = {}
    for bundle in as_bundles(bundles):
        for op_name in bundle:
            winners[op_name] = bundle
    return winners


def resolve_winners(bundles: Iterable[Mapping]) -> Dict[str, str]:
    """
    Work out which bundle supplies each operation name, last writer winning.

    Args:
        bundles: The bundles in composition order.

    Returns:
        A dict mapping operation names to the name of the winning bundle.
    """
    return {op_name: bundle.name for op_name, bundle in winning_bundles(bundles).items()}


def operation_rows(target: Any, bundles: Iterable[Mapping]) -> List[List[str]]:
    """
    Build one row per operation name touched by `bundles`.

    Each row holds the operation name, the winning bundle, and whether the
    target currently holds that bundle's operation.

    Args:
        target: The composition target to inspect.
        bundles: The bundles in composition order.

    Returns:
        A list of rows sorted by operation name.
    """
    rows = []
    for op_name, bundle in sorted(winning_bundles(bundles).items()):
        try:
            applied = operation_of(target, op_name) is bundle[op_name]
        except AttributeError:
            applied = False
        rows.append([op_name, bundle.name, "yes" if applied else "no"])
    return rows


def tabulate_operations(target: Any, bundles: Iterable[Mapping], tablefmt: str = "presto") -> str:
    """
    Render which bundle supplies each operation on a target.

    Args:
        target: The composition target to inspect.
        bundles: The bundles in composition order.
        tablefmt: Any table format understood by `tabulate`.

    Returns:
        The rendered table, headed by a line naming the target.
    """
    rows = operation_rows(target, bundles)
    table = tabulate(rows, headers=["Operation", "Bundle", "Applied"], tablefmt=tablefmt)
    return f"Operations on {describe_target(target)}:\n{table}"


def display_operations(target: Any, bundles: Iterable[Mapping]):
    """
    Print the table built by `tabulate_operations`.

    Args:
        target: The composition target to inspect.
        bundles: The bundles in composition order.
    """
    print(tabulate_operations(target, bundles))
