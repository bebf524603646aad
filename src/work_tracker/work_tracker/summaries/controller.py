from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..export.excel import XLSX_MIMETYPE, export_to_excel
from ..records.summary import calculate_employee_work_periods

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    summaries = container.summary_service
    records = container.record_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _period_error():
        return _error("조회할 수 없는 기간입니다.", 400)

    @app.route("/api/summary/weekly", methods=["GET"], endpoint="api_summary_weekly")
    def api_summary_weekly():
        offset = request.args.get("offset", default=0, type=int)
        try:
            report = summaries.weekly_report(offset=offset)
        except (OverflowError, ValueError):
            return _period_error()
        return jsonify({"success": True, "offset": offset, **report.to_dict()})

    @app.route("/api/summary/monthly", methods=["GET"], endpoint="api_summary_monthly")
    def api_summary_monthly():
        offset = request.args.get("offset", default=0, type=int)
        try:
            report = summaries.monthly_report(offset=offset)
        except (OverflowError, ValueError):
            return _period_error()
        return jsonify({"success": True, "offset": offset, **report.to_dict()})

    @app.route("/api/calendar", methods=["GET"], endpoint="api_calendar")
    def api_calendar():
        year = request.args.get("year", type=int)
        month = request.args.get("month", type=int)
        if month is not None and not 1 <= month <= 12:
            return _error("month는 1~12 사이여야 합니다", 400)
        if year is not None and not 1 <= year <= 9999:
            return _error("year는 1~9999 사이여야 합니다", 400)
        try:
            cal = summaries.calendar(year=year, month=month)
        except (OverflowError, ValueError):
            return _period_error()
        return jsonify({"success": True, **cal.to_dict()})

    def _send_export(start: str, end: str, *, week_range=None):
        all_records = records.records
        periods = calculate_employee_work_periods(all_records, start, end)
        if not periods:
            return _error("내보낼 데이터가 없습니다.", 404)

        first = parse_iso_date(start)
        try:
            export = export_to_excel(periods, first.year, first.month, all_records=all_records, week_range=week_range, now=container.clock())
        except Exception:
            logger.exception("Excel export failed for %s..%s", start, end)
            return _error("엑셀 파일 생성 중 오류가 발생했습니다.", 500)

        return send_file(
            io.BytesIO(export.content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/export/monthly.xlsx", methods=["GET"], endpoint="export_monthly")
    def export_monthly():
        offset = request.args.get("offset", default=0, type=int)
        try:
            report = summaries.monthly_report(offset=offset)
        except (OverflowError, ValueError):
            return _period_error()
        return _send_export(report.start, report.end)

    @app.route("/export/weekly.xlsx", methods=["GET"], endpoint="export_weekly")
    def export_weekly():
        offset = request.args.get("offset", default=0, type=int)
        try:
            report = summaries.weekly_report(offset=offset)
        except (OverflowError, ValueError):
            return _period_error()
        return _send_export(report.start, report.end, week_range=(report.start, report.end))
