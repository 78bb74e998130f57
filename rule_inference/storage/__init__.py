# ==============================================
# STORAGE
# ==============================================
#
# Read-only query clients for the live data store. Both clients
# expose the same methods (ping, count_nulls, fetch_values,
# min_max, distinct_values), so the analyzer and the inference
# service never branch on the backend.
#
# Modules:
# --------
# - mysql_client.py   → MySQLClient (pymysql)
# - mongo_client.py   → MongoClient (pymongo)
# - errors.py         → DataStoreError
#
# ==============================================

from typing import Optional, Union

from rule_inference.config import AppConfig, get_config
from .errors import DataStoreError
from .mongo_client import MongoClient
from .mysql_client import MySQLClient


def create_data_store(config: Optional[AppConfig] = None) -> Union[MySQLClient, MongoClient]:
    """
    Build the (unconnected) client selected by config.data_store.

    Args:
        config: Application configuration. If None, loads from environment.

    Returns:
        A MySQLClient or MongoClient
    """
    config = config or get_config()
    if config.data_store == "mongodb":
        return MongoClient(
            host=config.mongo.host,
            port=config.mongo.port,
            database=config.mongo.database,
            user=config.mongo.user,
            password=config.mongo.password
        )
    return MySQLClient(
        host=config.mysql.host,
        port=config.mysql.port,
        user=config.mysql.user,
        password=config.mysql.password,
        database=config.mysql.database
    )


__all__ = ["DataStoreError", "MongoClient", "MySQLClient", "create_data_store"]
