import logging
import os
from dotenv import load_dotenv

from flask import Flask, render_template, request
from jinja2 import TemplateError

from calendar_month import (
    WEEKDAY_NAMES,
    CalendarError,
    build_month_from_notation,
    next_month,
    previous_month,
    to_notation,
)

logger = logging.getLogger(__name__)

load_dotenv()


def create_app(config=None) -> Flask:
    app = Flask(__name__)
    app.config["CALENDAR_DEFAULT_MONTH"] = os.getenv("CALENDAR_DEFAULT_MONTH", "2017-03")
    app.config["CALENDAR_TEMPLATE"] = os.getenv("CALENDAR_TEMPLATE", "index.html")
    if config:
        app.config.update(config)

    # 不正な既定値やテンプレートの欠落は起動時に落とす
    fallback = build_month_from_notation(app.config["CALENDAR_DEFAULT_MONTH"])
    app.jinja_env.get_template(app.config["CALENDAR_TEMPLATE"])

    @app.route("/")
    def index():
        notation = request.args.get("month")

        month = fallback
        if notation is not None:
            try:
                month = build_month_from_notation(notation)
            except CalendarError as e:
                logger.warning("Falling back to %s: %s", fallback.display_name, e)

        try:
            return render_template(
                app.config["CALENDAR_TEMPLATE"],
                month=month,
                weekdays=WEEKDAY_NAMES,
                prev_notation=to_notation(*previous_month(month.year, month.month)),
                next_notation=to_notation(*next_month(month.year, month.month)),
            )
        except TemplateError as e:
            # 描画に失敗したらエラーメッセージをそのまま返す
            logger.error("Template rendering failed: %s", e)
            return str(e)

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    app.run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        debug=os.getenv("FLASK_DEBUG", "0") in {"1", "true", "yes", "on"},
    )
