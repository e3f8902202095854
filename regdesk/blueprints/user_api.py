import logging

from flask import flash, redirect, render_template, url_for
from . import web_bp
from ..forms.user_forms import RegisterForm
from ..services import user_tasks

logger = logging.getLogger(__name__)

REGISTER_TITLE = "Register Here"


def _render_register(form: RegisterForm, errors_array: list[str]):
	return render_template(
		"user_register.html",
		title=REGISTER_TITLE,
		form=form,
		errors_array=errors_array,
	)


@web_bp.get("/user/register")
def register_form():
	return _render_register(RegisterForm(), [])


'''
表单字段：
	csrf_token, first_name, last_name, email_address, password, confirm_password
成功：302 跳转到 /
失败：200 重新渲染表单，errors_array 为按字段顺序的错误信息
'''
@web_bp.post("/user/register")
def register():
	form = RegisterForm()
	if not form.validate_on_submit():
		errors_array = form.errors_array()
		logger.info("Registration form rejected with %d error(s)", len(errors_array))
		return _render_register(form, errors_array)

	info = user_tasks.user_register_information(
		first_name=form.first_name.data,
		last_name=form.last_name.data,
		email_address=form.email_address.data,
		password=form.password.data,
	)
	ok, user_or_reason = user_tasks.Register(info)
	if not ok:
		return _render_register(form, ["E-mail already in use"])

	flash("Registration successful", "success")
	return redirect(url_for("web.home"))
