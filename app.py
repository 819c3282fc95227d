"""植物健康监测 —— Flask 后端（JSON 接口，供前端仪表盘轮询）"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from monitor import MonitorController, Settings, Ticker, create_monitor

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    controller: Optional[MonitorController] = None,
    ticker: Optional[Ticker] = None,
) -> Flask:
    settings = settings or Settings.from_env()
    if controller is None:
        controller, ticker = create_monitor(settings)
    if ticker is None:
        ticker = Ticker(controller, settings.tick_interval)

    app = Flask(__name__)
    CORS(app)
    app.config["MONITOR"] = controller
    app.config["TICKER"]  = ticker

    # ═══════════════════ 查询接口 ═══════════════════

    @app.get("/api/health")
    def health():
        return jsonify({"status": "ok", "ticker_running": ticker.is_running()})

    @app.get("/api/metrics")
    def metrics():
        return jsonify({"metrics": controller.metric_metadata()})

    @app.get("/api/state")
    def state():
        return jsonify(controller.snapshot())

    @app.get("/api/history")
    def history():
        """?metric=temperature 时只返回该指标的时间序列（多曲线图用）"""
        metric = request.args.get("metric")
        if metric:
            try:
                points = controller.series(metric)
            except ValueError:
                return jsonify({"error": f"未知指标: {metric}"}), 400
            return jsonify({
                "metric": metric,
                "count":  len(points),
                "series": [{"time": t.isoformat(), "value": v} for t, v in points],
            })
        entries = [e.to_dict() for e in controller.history()]
        return jsonify({"count": len(entries), "history": entries})

    @app.get("/api/actions")
    def actions():
        return jsonify({
            "actions": [dict(index=i, **a.to_dict()) for i, a in enumerate(controller.actions())]
        })

    # ═══════════════════ 用户操作 ═══════════════════

    @app.post("/api/actions/<int(signed=True):index>")
    def resolve_action(index: int):
        """body: {"accepted": true|false}"""
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "请求体必须是 JSON 对象"}), 400
        accepted = body.get("accepted")
        if not isinstance(accepted, bool):
            return jsonify({"error": "缺少布尔字段 accepted"}), 400

        result = controller.resolve_action(index, accepted)
        if result is None:
            return jsonify({"error": f"动作 {index} 不存在或已处理"}), 409
        return jsonify(result.to_dict())

    @app.post("/api/tick")
    def tick():
        controller.tick()
        return jsonify(controller.snapshot())

    if settings.autostart:
        ticker.start()
    return app


# ═══════════════════ 入口 ═══════════════════

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s %(message)s")
    cfg = Settings.from_env()
    # debug 重载器会再起一个进程，导致两个 ticker
    create_app(cfg).run(host=cfg.host, port=cfg.port, debug=False, threaded=True)
