"""应用配置模块

提供不同环境的配置类，支持通过环境变量覆盖默认值。
"""

import os


class SqlConfig:
    SQLNAME = 'regdesk'
    SQLURL = '127.0.0.1'
    SQLPORT = '3306'
    SQLUSER = 'root'


class AppConfig(SqlConfig):
    # 允许通过环境变量覆盖
    SQLNAME = os.getenv("SQLNAME", SqlConfig.SQLNAME)
    SQLURL = os.getenv("SQLURL", SqlConfig.SQLURL)
    SQLPORT = os.getenv("SQLPORT", SqlConfig.SQLPORT)
    SQLUSER = os.getenv("SQLUSER", SqlConfig.SQLUSER)

    # 默认使用本地 MySQL（root 无密码），DATABASE_URL 可整体覆盖
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        f"mysql+pymysql://{SQLUSER}@{SQLURL}:{SQLPORT}/{SQLNAME}?charset=utf8mb4",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")
    WTF_CSRF_ENABLED = os.getenv("WTF_CSRF_ENABLED", "1") not in ("0", "false", "False")


class TestingConfig(AppConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    # 测试中只需要可校验的哈希，不需要强度
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    WTF_CSRF_ENABLED = False


def get_config(env: str | None = None):
    """
    返回用于 Flask app.config.from_object 的配置类。
    env 为空时读取 APP_ENV 环境变量。
    """
    env = env or os.getenv("APP_ENV")
    if env == "testing":
        return TestingConfig
    return AppConfig
