import logging

from flask import Flask, jsonify

from circom_input.config import BN254

from circom_routes import circom_bp, init_circom_bp


def create_app(config=BN254):
    app = Flask(__name__)
    # 입력 순서(negalfa1xbeta2, gamma2, ...)를 응답에서도 유지
    app.json.sort_keys = False

    init_circom_bp(config)
    app.register_blueprint(circom_bp)

    @app.route("/")
    def index():
        return jsonify({"endpoints": ["/circom/params", "/circom/convert"]})

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
