import logging

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from errors import LedgerError
from model import db, TransactionStore
from notifier import ReminderNotifier, make_mail_api
from schemas import ReminderRequest, parse
from service import TransactionService
from settings import Settings


def create_app(settings=None, notifier=None):
    settings = settings or Settings.load()

    # --- App Initialization ---
    app = Flask(__name__)
    app.config['SQLALCHEMY_DATABASE_URI'] = settings.database_url
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    # --- Extension Initialization ---
    db.init_app(app)
    CORS(app)

    # --- Create tables if they don't exist ---
    with app.app_context():
        db.create_all()

    service = TransactionService(TransactionStore(db))
    if notifier is None:
        notifier = ReminderNotifier(
            make_mail_api(settings.brevo_api_key),
            settings.mail_sender,
            settings.currency_symbol,
        )
    app.extensions['transaction_service'] = service
    app.extensions['reminder_notifier'] = notifier

    @app.errorhandler(LedgerError)
    def handle_ledger_error(e):
        app.logger.warning("%s error on %s %s: %s", e.kind, request.method, request.path, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": str(e), "kind": "error"}), 500

    @app.route('/api/transactions', methods=['POST'])
    def create_transaction():
        transaction = service.create(request.get_json(silent=True))
        return jsonify(transaction), 201

    @app.route('/api/transactions', methods=['GET'])
    def list_transactions():
        return jsonify(service.list_all()), 200

    @app.route('/api/transactions/<transaction_id>', methods=['PUT'])
    def update_transaction(transaction_id):
        # a missing id is answered with null, not 404
        transaction = service.update(transaction_id, request.get_json(silent=True))
        return jsonify(transaction), 200

    @app.route('/api/transactions/<transaction_id>', methods=['DELETE'])
    def delete_transaction(transaction_id):
        service.delete(transaction_id)
        return jsonify({"message": "Transaction deleted"}), 200

    @app.route('/api/transactions/export', methods=['GET'])
    def export_transactions():
        output = service.export()
        return send_file(output, download_name="transactions.xlsx", as_attachment=True)

    @app.route('/api/remind', methods=['POST'])
    def send_reminder():
        reminder = parse(ReminderRequest, request.get_json(silent=True))
        info = notifier.send_reminder(reminder.email, reminder.name, reminder.amount_pending)
        return jsonify({"message": "Reminder Sent", "info": info}), 200

    return app


if __name__ == '__main__':
    settings = Settings.load()
    logging.basicConfig(level=logging.INFO, format='%(asctime)s:%(levelname)s:%(name)s: %(message)s')
    create_app(settings).run(port=settings.port, debug=settings.debug)
