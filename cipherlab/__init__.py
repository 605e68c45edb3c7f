from __future__ import annotations

import random
from typing import Any, Dict, Mapping, Optional, Tuple

from flask import Flask, abort, jsonify, redirect, request, session, url_for

from cipherlab.config import get_config
from cipherlab.encryption import sdes
from cipherlab.encryption.algorithms import CipherAlgorithm
from cipherlab.encryption.practice import DIFFICULTIES, Challenge
from cipherlab.services.encryption_service import EncryptionService
from cipherlab.services.localization import TRANSLATIONS

SDES_KEYS_SESSION = "sdes_keys"


def _challenge_session_key(slug: str) -> str:
    return f"challenge_{slug}"


def create_app(config: Optional[object] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config or get_config())
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    encryption_service = EncryptionService(
        rng=random.Random(app.config.get("CHALLENGE_SEED"))
    )

    @app.before_request
    def ensure_language() -> None:
        if "lang" not in session:
            session["lang"] = app.config.get("DEFAULT_LANGUAGE", "en")

    def get_lang() -> str:
        return session.get("lang", "en")

    def t(key: str) -> str:
        return TRANSLATIONS.gettext(key, get_lang())

    def error(message: str, status: int = 400) -> Tuple[Any, int]:
        app.logger.warning("%s %s rejected: %s", request.method, request.path, message)
        return jsonify({"error": message}), status

    def get_algorithm_or_404(slug: str) -> CipherAlgorithm:
        try:
            return encryption_service.get_algorithm(slug)
        except KeyError:
            abort(404)

    def payload() -> Mapping[str, Any]:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else request.form

    def field(name: str, default: Optional[str] = None) -> Optional[str]:
        value = payload().get(name, default)
        return value if value is None or isinstance(value, str) else str(value)

    @app.errorhandler(404)
    def not_found(exc: Exception) -> Tuple[Any, int]:
        return jsonify({"error": t("unknown_algorithm")}), 404

    @app.route("/")
    def home() -> Any:
        lang = get_lang()
        return jsonify(
            {
                "title": t("app_title"),
                "lang": lang,
                "algorithms": [
                    algorithm.to_dict(lang)
                    for algorithm in encryption_service.all_algorithms()
                ],
            }
        )

    @app.route("/set-language/<lang>")
    def set_language(lang: str) -> Any:
        session["lang"] = "ru" if lang == "ru" else "en"
        return redirect(request.referrer or url_for("home"))

    @app.route("/algorithms")
    def algorithm_categories() -> Any:
        lang = get_lang()
        return jsonify(
            {
                category: [algorithm.to_dict(lang) for algorithm in algorithms]
                for category, algorithms in encryption_service.categories().items()
            }
        )

    @app.route("/algorithms/<slug>")
    def algorithm_detail(slug: str) -> Any:
        algorithm = get_algorithm_or_404(slug)
        lang = get_lang()
        data: Dict[str, Any] = algorithm.to_dict(lang)
        material = encryption_service.get_practice_material(slug)
        if material is not None:
            data["practice"] = {
                "title": material.title(lang),
                "description": material.description(lang),
                "code": material.code,
            }
        return jsonify(data)

    @app.route("/algorithms/<slug>/encrypt", methods=["POST"])
    def algorithm_encrypt(slug: str) -> Any:
        algorithm = get_algorithm_or_404(slug)
        text = field("text", "")
        key = field("key") if algorithm.requires_key else None
        if not text:
            return error(t("input_required"))
        try:
            result = encryption_service.encrypt(slug, text, key)
            steps = encryption_service.explain(slug, text, key)
        except ValueError as exc:
            return error(str(exc))
        return jsonify({"result": result, "steps": steps})

    @app.route("/algorithms/<slug>/decrypt", methods=["POST"])
    def algorithm_decrypt(slug: str) -> Any:
        algorithm = get_algorithm_or_404(slug)
        text = field("text", "")
        key = field("key") if algorithm.requires_key else None
        if not text:
            return error(t("input_required"))
        try:
            result = encryption_service.decrypt(slug, text, key)
        except ValueError as exc:
            return error(str(exc))
        return jsonify({"result": result})

    @app.route("/algorithms/<slug>/visualize", methods=["POST"])
    def algorithm_visualize(slug: str) -> Any:
        get_algorithm_or_404(slug)
        try:
            visualization = encryption_service.visualize(
                slug, field("text", ""), field("key")
            )
        except ValueError as exc:
            return error(str(exc))
        return jsonify({"visualization": visualization})

    @app.route("/sdes/keys", methods=["POST"])
    def sdes_keys() -> Any:
        session.pop(SDES_KEYS_SESSION, None)
        try:
            schedule = encryption_service.generate_sdes_keys(field("key"))
        except ValueError as exc:
            return error(str(exc))
        keys = {
            "permuted_key": sdes.format_bits(schedule.permuted_key),
            "k1": sdes.format_bits(schedule.k1),
            "k2": sdes.format_bits(schedule.k2),
        }
        session[SDES_KEYS_SESSION] = {"k1": keys["k1"], "k2": keys["k2"]}
        return jsonify(keys)

    def session_subkeys() -> Optional[Tuple[sdes.Bits, sdes.Bits]]:
        stored = session.get(SDES_KEYS_SESSION)
        if not stored:
            return None
        return (
            tuple(int(bit) for bit in stored["k1"]),
            tuple(int(bit) for bit in stored["k2"]),
        )

    @app.route("/sdes/encrypt", methods=["POST"])
    def sdes_encrypt() -> Any:
        subkeys = session_subkeys()
        if subkeys is None:
            return error(t("sdes_keys_required"))
        try:
            steps = encryption_service.sdes_encrypt(field("plaintext"), *subkeys)
        except ValueError as exc:
            return error(str(exc))
        return jsonify(
            {
                "ciphertext": sdes.format_bits(steps[-1].bits),
                "steps": [
                    {"step": step.name, "bits": sdes.format_bits(step.bits)}
                    for step in steps
                ],
            }
        )

    @app.route("/sdes/decrypt", methods=["POST"])
    def sdes_decrypt() -> Any:
        subkeys = session_subkeys()
        if subkeys is None:
            return error(t("sdes_keys_required"))
        try:
            plaintext = encryption_service.sdes_decrypt(
                field("ciphertext"), *subkeys
            )
        except ValueError as exc:
            return error(str(exc))
        return jsonify({"plaintext": plaintext})

    @app.route("/practice/<slug>/challenge", methods=["GET", "POST"])
    def practice_challenge(slug: str) -> Any:
        get_algorithm_or_404(slug)
        session_key = _challenge_session_key(slug)
        if request.method == "GET":
            difficulty = request.args.get("difficulty", "medium")
            if difficulty not in DIFFICULTIES:
                return error(f"Unknown difficulty: {difficulty}")
            try:
                challenge = encryption_service.new_challenge(slug, difficulty)
            except KeyError:
                abort(404)
            session[session_key] = challenge.to_dict()
            return jsonify(
                {
                    "slug": challenge.slug,
                    "difficulty": challenge.difficulty,
                    "ciphertext": challenge.ciphertext,
                    "key": challenge.key,
                    "hint": challenge.hint,
                }
            )

        stored = session.get(session_key)
        if not stored:
            return error(t("challenge_missing"))
        challenge = Challenge.from_dict(stored)
        feedback = encryption_service.check_challenge(
            challenge, field("answer", "")
        )
        return jsonify(
            {
                "is_correct": feedback.is_correct,
                "feedback": t(feedback.feedback_key),
                "solution": challenge.solution,
            }
        )

    return app
