"""
AdmitLens
基于加权历史复录比与相似案例检索的考研录取可能性分析。
"""

__version__ = "0.1.0"
