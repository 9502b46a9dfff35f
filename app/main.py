"""
HR Dashboard - Main Flask Application
Entry point for the web server and API routes.
"""

import logging
import random
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request, Response
from flask_cors import CORS

from .config import get_config_manager
from .models import Roster, DashboardState, ViewConfig
from .ranking import ranked_view, heatmap_view
from .scoring import Evaluator, summarize
from .sharing import ShareStore
from .utils import ActivityLogger, export_roster_csv, export_view_csv, export_filename


logger = logging.getLogger(__name__)


def create_app(
    config_path: str = None,
    roster: Optional[Roster] = None,
    evaluator: Optional[Evaluator] = None,
    state: Optional[DashboardState] = None
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_path: Optional base path holding config/ and data/.
        roster: Optional pre-built roster (otherwise loaded from the fixture).
        evaluator: Optional evaluator (otherwise built from configuration).
        state: Optional dashboard state container.

    Returns:
        Configured Flask application.
    """
    # Determine base path
    if config_path:
        base_path = Path(config_path)
    else:
        base_path = Path(__file__).parent.parent

    # Initialize config manager
    config_manager = get_config_manager(base_path)
    config = config_manager.load()

    if roster is None:
        roster = Roster.load(config.data_file)
        if roster.rejected:
            logger.warning("%d fixture records were excluded", len(roster.rejected))

    if evaluator is None:
        seed = config.evaluation.seed
        evaluator = Evaluator(
            rng=random.Random(seed) if seed is not None else None,
            delay_range=config.evaluation.delay_range
        )

    if state is None:
        store = ShareStore(config.shares_file) if config.sharing.persist else None
        state = DashboardState(
            job_role=config.job_role,
            default_email=config.sharing.default_email,
            store=store
        )

    app = Flask(__name__)

    # The dashboard UI is served separately
    CORS(app)

    app.config["HR_DASHBOARD_CONFIG_MANAGER"] = config_manager
    app.config["HR_DASHBOARD_BASE_PATH"] = base_path
    app.config["HR_DASHBOARD_ROSTER"] = roster
    app.config["HR_DASHBOARD_EVALUATOR"] = evaluator
    app.config["HR_DASHBOARD_STATE"] = state
    app.config["HR_DASHBOARD_ACTIVITY"] = ActivityLogger(config.activity_dir)

    register_routes(app)

    return app


def register_routes(app: Flask):
    """Register all application routes."""

    def roster() -> Roster:
        return app.config["HR_DASHBOARD_ROSTER"]

    def state() -> DashboardState:
        return app.config["HR_DASHBOARD_STATE"]

    def activity() -> ActivityLogger:
        return app.config["HR_DASHBOARD_ACTIVITY"]

    def view_config(search_skills: bool) -> ViewConfig:
        config = app.config["HR_DASHBOARD_CONFIG_MANAGER"].config
        return ViewConfig.from_params(
            sort=request.args.get("sort"),
            direction=request.args.get("direction"),
            search=request.args.get("search", ""),
            search_skills=search_skills,
            limit=config.ranking.view_limit
        )

    def view_params(config: ViewConfig) -> dict:
        return {
            "sort": config.sort_field.value,
            "direction": config.sort_direction.value,
            "search": config.search,
        }

    def candidate_or_404(candidate_id: int):
        candidate = roster().get(candidate_id)
        if candidate is None:
            return None, (jsonify({"error": f"Candidate {candidate_id} not found"}), 404)
        return candidate, None

    def csv_response(content: str, filename: str) -> Response:
        return Response(
            content,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"}
        )

    # =========================================================================
    # Configuration API
    # =========================================================================

    @app.route("/api/config", methods=["GET"])
    def get_configuration():
        """Get current configuration summary."""
        config_manager = app.config["HR_DASHBOARD_CONFIG_MANAGER"]
        return jsonify({
            **config_manager.get_summary(),
            "candidate_count": len(roster()),
        })

    # =========================================================================
    # Roster API
    # =========================================================================

    @app.route("/api/candidates", methods=["GET"])
    def get_candidates():
        """Get all candidates with total, status and shared flag."""
        current = state()
        candidates = [
            {
                **c.to_dict(),
                "total": c.total_score,
                "status": c.status.value,
                "shared": current.is_shared(c.id),
            }
            for c in roster()
        ]
        return jsonify({"candidates": candidates})

    @app.route("/api/candidates/<int:candidate_id>", methods=["GET"])
    def get_candidate(candidate_id: int):
        """Get a single candidate."""
        candidate, error = candidate_or_404(candidate_id)
        if error:
            return error
        return jsonify({
            **candidate.to_dict(),
            "total": candidate.total_score,
            "status": candidate.status.value,
            "shared": state().is_shared(candidate.id),
        })

    @app.route("/api/stats", methods=["GET"])
    def get_stats():
        """Header statistics."""
        return jsonify({**roster().stats(), "shared_count": state().shared_count})

    @app.route("/api/top-candidate", methods=["GET"])
    def get_top_candidate():
        """Candidate with the highest total score."""
        top = roster().top_candidate()
        if top is None:
            return jsonify({"error": "No candidates loaded"}), 404
        return jsonify({**top.to_dict(), "total": top.total_score, "status": top.status.value})

    # =========================================================================
    # Ranked views
    # =========================================================================

    @app.route("/api/leaderboard", methods=["GET"])
    def get_leaderboard():
        """Top candidates filtered by name or skill, sorted and truncated."""
        try:
            config = view_config(search_skills=True)
        except ValueError as e:
            return jsonify({"error": f"Invalid view parameters: {e}"}), 400

        current = state()
        rows = ranked_view(roster(), config)
        return jsonify({
            "view": view_params(config),
            "rows": [row.to_dict(shared=current.is_shared(row.candidate.id)) for row in rows],
            "shared_in_view": len(current.shared_in(row.candidate.id for row in rows)),
        })

    @app.route("/api/heatmap", methods=["GET"])
    def get_heatmap():
        """Skill heatmap over the ranked view, filtered by name."""
        try:
            config = view_config(search_skills=False)
        except ValueError as e:
            return jsonify({"error": f"Invalid view parameters: {e}"}), 400

        return jsonify({"view": view_params(config), **heatmap_view(roster(), config)})

    # =========================================================================
    # Evaluation API
    # =========================================================================

    @app.route("/api/candidates/<int:candidate_id>/evaluate", methods=["POST"])
    def evaluate_candidate(candidate_id: int):
        """Run the mock AI evaluation for one candidate."""
        candidate, error = candidate_or_404(candidate_id)
        if error:
            return error

        evaluator: Evaluator = app.config["HR_DASHBOARD_EVALUATOR"]
        result = evaluator.evaluate(candidate)
        if result is None:
            return jsonify({"error": "Evaluation failed"}), 422

        activity().log(
            "evaluate",
            candidate_id=candidate.id,
            scores={
                "crisis_management": result.crisis_management,
                "sustainability": result.sustainability,
                "team_motivation": result.team_motivation,
            }
        )
        return jsonify(result.to_dict())

    @app.route("/api/summary", methods=["GET"])
    def get_summary():
        """Roster-wide AI summary."""
        summary = summarize(roster())
        if summary is None:
            return jsonify({"error": "No candidates to summarize"}), 404
        activity().log("summarize", total_candidates=summary.total_candidates)
        return jsonify(summary.to_dict())

    # =========================================================================
    # Sharing API
    # =========================================================================

    @app.route("/api/candidates/<int:candidate_id>/share", methods=["POST"])
    def open_share(candidate_id: int):
        """Select a candidate and open the share dialog."""
        candidate, error = candidate_or_404(candidate_id)
        if error:
            return error
        draft = state().open_share(candidate)
        return jsonify(draft.to_dict())

    @app.route("/api/share/draft", methods=["POST"])
    def update_share_draft():
        """Edit the email or message of the open share dialog."""
        data = request.get_json(silent=True) or {}
        draft = state().update_draft(email=data.get("email"), message=data.get("message"))
        if draft is None:
            return jsonify({"error": "No share dialog open"}), 409
        return jsonify(draft.to_dict())

    @app.route("/api/share/send", methods=["POST"])
    def send_share():
        """Mark the selected candidate as shared with HR."""
        data = request.get_json(silent=True) or {}
        current = state()
        if data:
            current.update_draft(email=data.get("email"), message=data.get("message"))

        try:
            record = current.send_share()
        except OSError as e:
            logger.error("Could not save shared candidates: %s", e)
            return jsonify({"error": f"Could not save shared candidates: {e}"}), 500
        if record is None:
            return jsonify({"error": "No candidate selected for sharing"}), 409

        activity().log("share", candidate_id=record["candidate_id"], email=record["email"])
        return jsonify({**record, "shared_count": current.shared_count})

    @app.route("/api/share/cancel", methods=["POST"])
    def cancel_share():
        """Close the share dialog without sharing."""
        state().close_share()
        return jsonify({"success": True})

    @app.route("/api/shared", methods=["GET"])
    def get_shared():
        """Dashboard state including the shared relation."""
        return jsonify(state().to_dict())

    @app.route("/api/shared/<int:candidate_id>", methods=["DELETE"])
    def unshare(candidate_id: int):
        """Remove a candidate from the shared relation."""
        try:
            removed = state().unmark_shared(candidate_id)
        except OSError as e:
            logger.error("Could not save shared candidates: %s", e)
            return jsonify({"error": f"Could not save shared candidates: {e}"}), 500
        if removed:
            activity().log("unshare", candidate_id=candidate_id)
            return jsonify({"success": True})
        return jsonify({"error": f"Candidate {candidate_id} is not shared"}), 404

    # =========================================================================
    # Export API
    # =========================================================================

    @app.route("/api/export/candidates.csv", methods=["GET"])
    def export_candidates():
        """Download the full roster as CSV."""
        candidates = roster().candidates
        content = export_roster_csv(candidates, state().is_shared)
        activity().log("export", kind="roster", rows=len(candidates))
        return csv_response(content, export_filename("roster", len(candidates)))

    @app.route("/api/export/leaderboard.csv", methods=["GET"])
    def export_leaderboard():
        """Download the current leaderboard view as CSV."""
        try:
            config = view_config(search_skills=True)
        except ValueError as e:
            return jsonify({"error": f"Invalid view parameters: {e}"}), 400

        rows = ranked_view(roster(), config)
        content = export_view_csv(rows, state().is_shared)
        activity().log("export", kind="leaderboard", rows=len(rows), **view_params(config))
        return csv_response(content, export_filename("leaderboard", config.limit))

    # =========================================================================
    # Activity and health
    # =========================================================================

    @app.route("/api/activity", methods=["GET"])
    def get_activity():
        """Activity trail for this server session."""
        return jsonify({
            "summary": activity().get_session_summary(),
            "entries": activity().get_entries(request.args.get("action")),
        })

    @app.route("/api/health", methods=["GET"])
    def health_check():
        """Health check endpoint."""
        return jsonify({"status": "healthy", "candidates": len(roster())})
