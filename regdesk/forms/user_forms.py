"""注册表单与校验链

FlaskForm 会自动带上 csrf_token 隐藏字段，提交时由 CSRFProtect 校验。
每个字段的校验按顺序全部执行（必填失败也不中断），页面按字段顺序展示全部错误。
"""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import Email, EqualTo, Length, Regexp, ValidationError

from ..repositories import user_repo
from ..utils.sanitizer import PASSWORD_RE, normalize_email

PASSWORD_RULE_MESSAGE = (
    'Password must contain at least 1 lowercase letter, uppercase letter, '
    'number, and special character (i.e. "!@#$%^&*")'
)


class Present:
    """字段缺失或为空串时报错；与 DataRequired 不同，不中断后续校验，纯空白视为已填写"""

    def __init__(self, message):
        self.message = message

    def __call__(self, form, field):
        if not field.data:
            raise ValidationError(self.message)


class RawLength:
    """按用户提交的原始值检查长度（在规范化之前）"""

    def __init__(self, max, message):
        self.max = max
        self.message = message

    def __call__(self, form, field):
        raw = field.raw_data[0] if field.raw_data else ""
        if len(raw) > self.max:
            raise ValidationError(self.message)


class NormalizeEmail:
    """规范化 field.data；无法规范化时置为 None，由后面的 Email 校验报错"""

    def __call__(self, form, field):
        try:
            field.data = normalize_email(field.data)
        except ValueError:
            field.data = None


class RegisterForm(FlaskForm):
    first_name = StringField('First Name', validators=[
        Present('Please enter a first name'),
        Length(max=50, message='First name must be shorter than 50 characters'),
    ])
    last_name = StringField('Last Name', validators=[
        Present('Please enter a last name'),
        Length(max=50, message='Last name must be shorter than 50 characters'),
    ])
    email_address = StringField('Email Address', validators=[
        Present('Please enter an email address'),
        RawLength(max=255, message='Email must be shorter than 255 characters'),
        NormalizeEmail(),
        Email(message='Please provide a valid email address'),
    ])
    password = PasswordField('Password', validators=[
        Present('Please enter a password'),
        Length(max=50, message='Must be less than 50 characters'),
        Regexp(PASSWORD_RE, message=PASSWORD_RULE_MESSAGE),
    ])
    confirm_password = PasswordField('Confirm Password', validators=[
        Present('Please confirm your password'),
        Length(max=50, message='Password confirmation must not be more than 50 characters long'),
        EqualTo('password', message='Password confirmation does not match'),
    ])
    submit = SubmitField('Register')

    def validate_email_address(self, field):
        # 在格式校验之后执行；并发注册由数据库唯一约束兜底
        if field.data and user_repo.get_by_email(field.data):
            raise ValidationError('E-mail already in use')

    def errors_array(self) -> list[str]:
        """按字段顺序返回所有错误信息"""
        return [message for field in self for message in field.errors]
