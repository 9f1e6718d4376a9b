import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from models import db, DemoWallet
from .errors import WalletUnavailableError

logger = logging.getLogger(__name__)


def get_student_balance(student_id):
    """Return the student's balance, or 0.00 when they have no wallet."""
    try:
        wallet = db.session.get(DemoWallet, student_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to read wallet for student %s", student_id)
        raise WalletUnavailableError('Wallet unavailable') from exc

    if wallet is None:
        logger.info("No wallet found for student %s", student_id)
        return Decimal('0.00')
    return Decimal(wallet.balance)
