import threading

from flask import current_app
from flask_mail import Message

from . import mail


def notify_owner(title, body):
    """
    Email the club owners about a new request.

    Returns False when no recipients are configured (the message is only logged).
    """
    recipients = current_app.config.get('NOTIFY_RECIPIENTS') or []
    if not recipients:
        current_app.logger.info(f"Notification (no recipients configured): {title}\n{body}")
        return False

    msg = Message(title,
                  sender=current_app.config['MAIL_DEFAULT_SENDER'],
                  recipients=list(recipients))
    msg.body = body
    mail.send(msg)
    return True


def dispatch_notification(notify, title, body):
    """
    Run ``notify(title, body)`` without letting it affect the caller.

    With NOTIFY_ASYNC the call happens on a daemon thread carrying its own app
    context and the thread is returned; otherwise it runs inline. Either way,
    errors are logged and dropped.
    """
    app = current_app._get_current_object()

    def send():
        with app.app_context():
            try:
                notify(title, body)
            except Exception as e:
                app.logger.error(f"Error sending notification: {e}")

    if not app.config.get('NOTIFY_ASYNC', True):
        send()
        return None

    thread = threading.Thread(target=send, name='notify-owner', daemon=True)
    thread.start()
    return thread
