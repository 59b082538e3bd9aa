# server.py — PC Builder backend API
from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_compress import Compress
from waitress import serve
import logging

import config
from advisor_ai import AdvisorError, apply_suggestion, generate_smart_build, parse_budget
from build_templates import TemplateStore, resolve_template
from cart import BuildSession, require_quantity
from catalog import CatalogStore, parse_products_csv, rows_to_products, validate_product_record
from models import ALL_CATEGORIES, Category, Product
from quotation import format_share_text, installment_plans
from search_helpers import SORT_MODES, facet_panel, filter_products, sort_products
from storage import CartStore, KeyValueStore

logger = logging.getLogger("pcbuilder")

RESERVED_ARGS = {"q", "category", "sort"}


class InvalidRequest(ValueError):
    pass


def _body() -> dict:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise InvalidRequest("JSON object body required")
    return body


def _filters_from_args(args) -> dict:
    filters = {}
    for key in args.keys():
        if key in RESERVED_ARGS:
            continue
        values = []
        for raw in args.getlist(key):
            values.extend(v.strip() for v in raw.split(",") if v.strip())
        if values:
            filters[key] = values
    return filters


def _quantity(body: dict, key: str = "quantity", default: int = 1) -> int:
    try:
        return require_quantity(body.get(key, default), key)
    except ValueError as e:
        raise InvalidRequest(str(e))


def _category(raw) -> Category:
    try:
        return Category.parse(raw)
    except ValueError as e:
        raise InvalidRequest(str(e))


def create_app(catalog: CatalogStore = None, session: BuildSession = None,
               templates: TemplateStore = None, generate=None) -> Flask:
    """Wire the stores into a Flask app. Defaults use the files under PERSIST_DIR."""
    kv = KeyValueStore(config.STATE_FILE)
    catalog = catalog or CatalogStore(config.CATALOG_FILE)
    session = session or BuildSession(CartStore(kv, config.CART_KEY))
    templates = templates or TemplateStore(kv, config.TEMPLATES_KEY)

    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    Compress(app)

    def _product_or_404(product_id):
        product = catalog.get(product_id or "")
        if product is None:
            return None, (jsonify({"error": f"product not found: {product_id}"}), 404)
        return product, None

    @app.errorhandler(InvalidRequest)
    def bad_request(error):
        return jsonify({"error": str(error)}), 400

    # ----------------------------
    # Health
    # ----------------------------

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({
            "status": "healthy",
            "service": "PC Builder API",
            "products": len(catalog.list()),
        })

    # ----------------------------
    # Catalog
    # ----------------------------

    @app.route("/api/products", methods=["GET"])
    def products_api():
        """Filtered product list: ?q=&category=&sort=&<specKey>=v1,v2"""
        category = request.args.get("category") or ALL_CATEGORIES
        if category != ALL_CATEGORIES:
            category = _category(category)
        sort = request.args.get("sort", "default")
        if sort not in SORT_MODES:
            raise InvalidRequest(f"sort must be one of {', '.join(SORT_MODES)}")
        found = filter_products(catalog.list(), request.args.get("q", ""), category,
                                _filters_from_args(request.args))
        found = sort_products(found, sort)
        return jsonify({"products": [p.to_dict() for p in found], "count": len(found)})

    @app.route("/api/products/options", methods=["GET"])
    def product_options_api():
        """Facet options for one category, cascading over the other selections."""
        category = _category(request.args.get("category"))
        panel = facet_panel(catalog.list(), category, request.args.get("q", ""),
                            _filters_from_args(request.args))
        return jsonify({"category": category.value, "facets": panel})

    @app.route("/api/products", methods=["POST"])
    def upsert_product_api():
        body = _body()
        reason = validate_product_record(body)
        if not reason and not str(body.get("id") or "").strip():
            reason = "missing id"
        if reason:
            raise InvalidRequest(reason)
        ok, msg = catalog.upsert(Product.from_dict(body))
        if not ok:
            return jsonify({"error": "catalog write failed", "detail": msg}), 500
        return jsonify({"ok": True, "product": catalog.get(str(body["id"])).to_dict()})

    @app.route("/api/products/<product_id>", methods=["DELETE"])
    def delete_product_api(product_id):
        ok, msg = catalog.delete(product_id)
        if not ok:
            status = 404 if msg.startswith("product not found") else 500
            return jsonify({"error": msg}), status
        return jsonify({"ok": True, "deleted": product_id})

    @app.route("/api/products/import", methods=["POST"])
    def import_products_api():
        """
        CSV import. Expected JSON: {"csv": "...", "match_by_name": false, "commit": false}
        Without commit only the per-row preview is returned.
        """
        body = _body()
        try:
            rows = parse_products_csv(body.get("csv") or "", catalog.list(),
                                      match_by_name=bool(body.get("match_by_name")))
        except ValueError as e:
            raise InvalidRequest(str(e))
        result = {
            "rows": [r.to_dict() for r in rows],
            "new": sum(1 for r in rows if r.status == "new"),
            "update": sum(1 for r in rows if r.status == "update"),
            "error": sum(1 for r in rows if r.status == "error"),
            "committed": False,
        }
        if body.get("commit"):
            valid = rows_to_products(rows)
            if not valid:
                raise InvalidRequest("no valid rows to import")
            ok, msg = catalog.bulk_upsert(valid)
            if not ok:
                return jsonify({"error": "catalog write failed", "detail": msg}), 500
            result["committed"] = True
            logger.info("Imported %d product(s) from CSV", len(valid))
        return jsonify(result)

    # ----------------------------
    # Build / cart
    # ----------------------------

    @app.route("/api/build", methods=["GET"])
    def build_api():
        return jsonify(session.summary())

    @app.route("/api/build/add", methods=["POST"])
    def build_add_api():
        """Expected JSON: {"product_id": "cpu-1", "quantity": 1}"""
        body = _body()
        product, err = _product_or_404(body.get("product_id"))
        if err:
            return err
        return jsonify(session.add(product, _quantity(body)))

    @app.route("/api/build/remove", methods=["POST"])
    def build_remove_api():
        body = _body()
        return jsonify(session.remove(str(body.get("item_id") or "")))

    @app.route("/api/build/quantity", methods=["POST"])
    def build_quantity_api():
        """Expected JSON: {"item_id": "...", "delta": -1} or {"item_id": "...", "quantity": 3}"""
        body = _body()
        item_id = str(body.get("item_id") or "")
        if "quantity" in body:
            return jsonify(session.set_quantity(item_id, _quantity(body)))
        delta = body.get("delta")
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidRequest("delta must be an integer")
        return jsonify(session.change_quantity(item_id, delta))

    @app.route("/api/build/decrement", methods=["POST"])
    def build_decrement_api():
        body = _body()
        return jsonify(session.decrement(str(body.get("item_id") or ""), _quantity(body, "step")))

    @app.route("/api/build/replace", methods=["POST"])
    def build_replace_api():
        """Expected JSON: {"old_id": "...", "product_id": "...", "quantity": 1}"""
        body = _body()
        product, err = _product_or_404(body.get("product_id"))
        if err:
            return err
        return jsonify(session.replace(str(body.get("old_id") or ""), product, _quantity(body)))

    @app.route("/api/build/clear-category", methods=["POST"])
    def build_clear_category_api():
        body = _body()
        return jsonify(session.clear_category(_category(body.get("category"))))

    @app.route("/api/build/reset", methods=["POST"])
    def build_reset_api():
        return jsonify(session.reset())

    @app.route("/api/build/share", methods=["GET"])
    def build_share_api():
        summary = session.summary()
        return jsonify({
            "text": format_share_text(session.cart),
            "total_price": summary["total_price"],
            "installments": installment_plans(summary["total_price"]),
        })

    # ----------------------------
    # Templates
    # ----------------------------

    @app.route("/api/templates", methods=["GET"])
    def templates_api():
        return jsonify({"templates": [t.to_dict() for t in templates.list()]})

    @app.route("/api/templates", methods=["POST"])
    def save_template_api():
        body = _body()
        try:
            template = templates.save(body.get("name") or "", session.cart)
        except ValueError as e:
            raise InvalidRequest(str(e))
        return jsonify({"ok": True, "template": template.to_dict()})

    @app.route("/api/templates/<template_id>/load", methods=["POST"])
    def load_template_api(template_id):
        template = templates.get(template_id)
        if template is None:
            return jsonify({"error": f"template not found: {template_id}"}), 404
        cart, dropped = resolve_template(template, catalog.list())
        summary = session.apply(cart)
        summary["dropped"] = dropped
        return jsonify(summary)

    @app.route("/api/templates/<template_id>", methods=["DELETE"])
    def delete_template_api(template_id):
        if not templates.delete(template_id):
            return jsonify({"error": f"template not found: {template_id}"}), 404
        return jsonify({"ok": True, "deleted": template_id})

    # ----------------------------
    # AI smart build
    # ----------------------------

    @app.route("/api/ai/build", methods=["POST"])
    def ai_build_api():
        """Expected JSON: {"budget": 45000, "usage": "1440p gaming"}"""
        body = _body()
        budget = parse_budget(body.get("budget"))
        usage = (body.get("usage") or "").strip()
        if budget is None or not usage:
            raise InvalidRequest("budget and usage are required")
        products = catalog.list()
        try:
            suggestion = generate_smart_build(products, budget, usage, generate=generate)
        except AdvisorError as e:
            logger.warning("Smart build failed: %s", e)
            return jsonify({"error": "AI smart build failed", "detail": str(e)}), 502
        cart, ignored = apply_suggestion(suggestion, products)
        if not cart:
            return jsonify({
                "error": "AI found no usable build, try another budget",
                "explanation": suggestion["explanation"],
                "ignored": ignored,
            }), 422
        summary = session.apply(cart)
        summary["explanation"] = suggestion["explanation"]
        summary["ignored"] = ignored
        return jsonify(summary)

    # ----------------------------
    # Error handlers
    # ----------------------------

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(OSError)
    def storage_error(error):
        logger.exception("Storage error")
        return jsonify({"error": "storage error", "detail": str(error)}), 500

    @app.errorhandler(500)
    def internal_server_error(error):
        return jsonify({"error": "Internal server error"}), 500

    return app


# ----------------------------
# Start server
# ----------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s: %(message)s")
    app = create_app()
    logger.info("Starting PC Builder API on http://%s:%s", config.HOST, config.PORT)
    logger.info("Debug mode: %s", config.DEBUG_MODE)

    if config.DEBUG_MODE:
        app.run(host=config.HOST, port=config.PORT, debug=True)
    else:
        serve(app, host=config.HOST, port=config.PORT)
