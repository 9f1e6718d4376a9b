"""
Wallet Model

Demo wallet balances. Read-only; no settlement happens here.
"""

from .base import db


class DemoWallet(db.Model):
    """Student balance used by the balance lookup stub."""
    __tablename__ = 'demo_wallet'

    student_id = db.Column(db.String(100), primary_key=True)
    balance = db.Column(db.Numeric(10, 2), nullable=False, default=0)
