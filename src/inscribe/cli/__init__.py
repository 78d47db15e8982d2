"""
CLI support modules: output mode configuration and machine-aware printing.
"""

from inscribe.cli import config, output

__all__ = ['config', 'output']
