"""用户数据访问仓库

抽象出数据库访问逻辑，方便后续替换为其它存储。"""

from ..extensions import db
from ..models.user import User


def get_by_id(user_id: int) -> User | None:
	return db.session.get(User, user_id)


def get_by_email(email_address: str) -> User | None:
	return User.query.filter_by(email_address=email_address).first()


def create_user(first_name: str, last_name: str, email_address: str, hashed_password: str, *, commit: bool = True) -> User:
	user = User(first_name=first_name,
				last_name=last_name,
				email_address=email_address,
				hashed_password=hashed_password)
	db.session.add(user)
	if commit:
		db.session.commit()
	return user
