"""
Utility modules for the payments backend
"""
from .config_loader import AirtelConfig, ServerConfig, load_airtel_config, load_server_config

__all__ = [
    'AirtelConfig',
    'ServerConfig',
    'load_airtel_config',
    'load_server_config',
]
