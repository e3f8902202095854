import logging

from flask import current_app
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from ..extensions import db
from ..models.user import User
from ..repositories import user_repo

logger = logging.getLogger(__name__)

#####################################
# API Definition

class user_register_information(BaseModel):
    first_name: str
    last_name: str
    email_address: str
    password: str
#####################################


#####################################
#注册
def Register(info: user_register_information) -> tuple[bool, User | str]:
    """创建新用户

    Args:
        info: 已通过表单校验的注册信息，email 已规范化

    Returns:
        tuple: (是否成功, User对象或失败原因)
               - 邮箱已被占用: (False, "email_in_use")
               - 注册成功: (True, User对象)
    """
    if user_repo.get_by_email(info.email_address):
        logger.info("Registration rejected, email already in use: %s", info.email_address)
        return False, "email_in_use"

    method = current_app.config.get("PASSWORD_HASH_METHOD", "scrypt")
    hashed_password = generate_password_hash(info.password, method=method)

    try:
        user = user_repo.create_user(
            info.first_name,
            info.last_name,
            info.email_address,
            hashed_password,
        )
    except IntegrityError:
        # 两个请求同时用同一邮箱注册时，唯一约束会在提交时失败
        db.session.rollback()
        logger.info("Registration lost unique race for %s", info.email_address)
        return False, "email_in_use"

    logger.info("Registered user %s (%s)", user.id, user.email_address)
    return True, user
#####################################
