import logging
from html import escape
from app.utils.email import EmailSender

logger = logging.getLogger(__name__)


def _send_best_effort(sender: EmailSender, to_name: str, to_email: str, subject: str, html_body: str) -> bool:
    """
    Send an email without ever raising.
    Runs as a background task once the request's transaction has committed.
    """
    try:
        sender.send_email(to_name, to_email, subject, html_body)
        return True
    except Exception as e:
        logger.warning("Failed to send email to %s: %s", to_email, e)
        return False


def send_welcome_email(sender: EmailSender, name: str, email: str) -> bool:
    return _send_best_effort(
        sender,
        name,
        email,
        "Bem-vindo ao LoopMid!",
        f"<h1>Olá {escape(name)}!</h1><p>Sua conta foi criada com sucesso. Configure seu perfil para começar.</p>",
    )


def send_job_accepted_email(sender: EmailSender, client_name: str, client_email: str, job_title: str) -> bool:
    return _send_best_effort(
        sender,
        client_name,
        client_email,
        "Seu Job foi aceito!",
        f'<p>O freelancer pegou seu job "{escape(job_title)}". Agora vocês podem trocar mensagens na plataforma.</p>',
    )
