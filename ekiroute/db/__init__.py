"""
데이터셋 로드 및 네트워크 그래프
"""

from ekiroute.db.network_graph import NetworkGraph, load_network, read_dataset

__all__ = [
    "NetworkGraph",
    "load_network",
    "read_dataset",
]
