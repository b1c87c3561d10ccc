"""
Dashboard endpoints
Overview, invoice and customer listings, and their form actions
"""

from flask import Blueprint, abort, jsonify, request
from flask_jwt_extended import jwt_required
import logging

from dashboard import db, view_cache
from dashboard.api.responses import respond
from dashboard.models import Customer, Invoice
from dashboard.services import (
    create_customer, create_invoice, delete_customer, delete_invoice,
    update_customer, update_invoice
)

dashboard_bp = Blueprint('dashboard', __name__)
logger = logging.getLogger(__name__)


@dashboard_bp.before_request
@jwt_required()
def require_session():
    """Every dashboard page needs a signed-in user."""


def build_overview():
    invoice_totals = Invoice.totals()
    return {
        'number_of_invoices': invoice_totals['count'],
        'number_of_customers': db.session.execute(
            db.select(db.func.count(Customer.id))
        ).scalar_one(),
        'total_paid_invoices': invoice_totals['paid'],
        'total_pending_invoices': invoice_totals['pending']
    }


@dashboard_bp.route('', methods=['GET'])
def overview():
    """Card totals for the dashboard home page."""
    return jsonify(view_cache.get_or_set(request.path, build_overview)), 200


# Invoices

@dashboard_bp.route('/invoices', methods=['GET'])
def list_invoices():
    invoices = view_cache.get_or_set(request.path, Invoice.listing)
    return jsonify({'invoices': invoices}), 200


@dashboard_bp.route('/invoices/create', methods=['POST'])
def create_invoice_submit():
    return respond(create_invoice(request.form))


@dashboard_bp.route('/invoices/<invoice_id>/edit', methods=['GET'])
def edit_invoice(invoice_id):
    """Invoice being edited plus the customers it may be assigned to."""
    invoice = db.session.get(Invoice, invoice_id)
    if invoice is None:
        abort(404)

    return jsonify({
        'invoice': invoice.to_dict(),
        'customers': Customer.choices()
    }), 200


@dashboard_bp.route('/invoices/<invoice_id>/edit', methods=['POST'])
def update_invoice_submit(invoice_id):
    return respond(update_invoice(invoice_id, request.form))


@dashboard_bp.route('/invoices/<invoice_id>/delete', methods=['POST'])
def delete_invoice_submit(invoice_id):
    return respond(delete_invoice(invoice_id))


# Customers

@dashboard_bp.route('/customers', methods=['GET'])
def list_customers():
    customers = view_cache.get_or_set(request.path, Customer.listing)
    return jsonify({'customers': customers}), 200


@dashboard_bp.route('/customers/create', methods=['POST'])
def create_customer_submit():
    return respond(create_customer(request.form))


@dashboard_bp.route('/customers/<customer_id>/edit', methods=['GET'])
def edit_customer(customer_id):
    customer = db.session.get(Customer, customer_id)
    if customer is None:
        abort(404)

    return jsonify({'customer': customer.to_dict()}), 200


@dashboard_bp.route('/customers/<customer_id>/edit', methods=['POST'])
def update_customer_submit(customer_id):
    return respond(update_customer(customer_id, request.form))


@dashboard_bp.route('/customers/<customer_id>/delete', methods=['POST'])
def delete_customer_submit(customer_id):
    return respond(delete_customer(customer_id))
