import os

# Configurações globais de ambiente
ALERTMANAGER_URL = os.getenv("ALERTMANAGER_URL")
SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
SLACK_CHANNEL_ID = os.getenv("SLACK_CHANNEL_ID")
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Alertmanager
ALERTMANAGER_SILENCES_PATH = "/api/v2/silences"
ALERTMANAGER_TIMEOUT_SECONDS = int(os.getenv("ALERTMANAGER_TIMEOUT_SECONDS", "10"))
ALERTMANAGER_VERIFY_TLS = os.getenv("ALERTMANAGER_VERIFY_TLS", "true").lower() == "true"

# Slack Web API
SLACK_API_URL = os.getenv("SLACK_API_URL", "https://slack.com/api/chat.postMessage")
SLACK_TIMEOUT_SECONDS = int(os.getenv("SLACK_TIMEOUT_SECONDS", "10"))
# Pausa entre mensagens consecutivas (rate limit do chat.postMessage)
SLACK_PUBLISH_DELAY_SECONDS = float(os.getenv("SLACK_PUBLISH_DELAY_SECONDS", "1.0"))

# Limite de blocos por mensagem do Slack
SLACK_BLOCK_LIMIT = int(os.getenv("SLACK_BLOCK_LIMIT", "50"))
# header + resumo + divider
RESERVED_BLOCKS = 3
# section + divider por silence
BLOCKS_PER_RECORD = 2

REPORT_TITLE = os.getenv("REPORT_TITLE", "Alertmanager Silences Report")

# Comentários
COMMENT_MAX_CHARS = int(os.getenv("COMMENT_MAX_CHARS", "100"))
COMMENT_ELLIPSIS = "..."
COMMENT_PLACEHOLDERS = {"-", "."}

# Estados conhecidos de um silence
STATE_ACTIVE = "active"
STATE_PENDING = "pending"
STATE_EXPIRED = "expired"
SILENCE_STATES = (STATE_ACTIVE, STATE_PENDING, STATE_EXPIRED)
