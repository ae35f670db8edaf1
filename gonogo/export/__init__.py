from .serializers import evaluation_to_dict
from .snapshot import build_snapshot, save_snapshot, snapshot_filename

__all__ = ["evaluation_to_dict", "build_snapshot", "save_snapshot", "snapshot_filename"]
