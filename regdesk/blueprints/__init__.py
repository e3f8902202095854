from flask import Blueprint, render_template

web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def home():
	return render_template("index.html", title="Welcome")


def register_blueprints(app):
	# 导入以挂载路由
	from . import user_api  # noqa: F401
	app.register_blueprint(web_bp)
