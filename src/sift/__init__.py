"""
sift - Inspect batches of model responses.

Group responses by model and prompt variables, export them as tables.
"""

from sift.export import export_rows
from sift.flatten import ExportRow, flatten
from sift.formatting import stringify_eval, truncate
from sift.grouping import GroupNode, group_by
from sift.inspector import ResponseInspector
from sift.keys import MODEL, GroupKey
from sift.loader import load_records
from sift.models.response import ResponseRecord

__version__ = "0.1.0"
__all__ = [
    "MODEL",
    "ExportRow",
    "GroupKey",
    "GroupNode",
    "ResponseInspector",
    "ResponseRecord",
    "__version__",
    "export_rows",
    "flatten",
    "group_by",
    "load_records",
    "stringify_eval",
    "truncate",
]
