from datetime import datetime
from ..extensions import db



class User(db.Model):
	__tablename__ = "users"

	id = db.Column(db.Integer, primary_key=True)
	first_name = db.Column(db.String(50), nullable=False)
	last_name = db.Column(db.String(50), nullable=False)
	email_address = db.Column(db.String(255), unique=True, nullable=False, index=True)
	hashed_password = db.Column(db.String(255), nullable=False)
	created_at = db.Column(db.DateTime, default=datetime.utcnow)
	updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

	def __repr__(self) -> str:  # pragma: no cover 简单repr无需测试
		return f"<User {self.email_address}>"
