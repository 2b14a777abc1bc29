"""
Coach Running IA - Configuration
アプリケーション全体の設定値・定数テーブルを管理
"""
import os

# =============================================
# アプリ情報
# =============================================
APP_NAME = "Coach Running IA"
APP_VERSION = "2.3.0"

# =============================================
# ログ設定
# =============================================
LOG_LEVEL = os.environ.get("RUNNING_COACH_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("RUNNING_COACH_LOG_FILE") or None

# =============================================
# 曜日 → 週内オフセット（月曜=0 … 日曜=6）
# =============================================
# プランはフランス語の曜日名で生成される。英語名も受け付ける
WEEKDAY_OFFSETS = {
    "Lundi": 0,
    "Mardi": 1,
    "Mercredi": 2,
    "Jeudi": 3,
    "Vendredi": 4,
    "Samedi": 5,
    "Dimanche": 6,
    "Monday": 0,
    "Tuesday": 1,
    "Wednesday": 2,
    "Thursday": 3,
    "Friday": 4,
    "Saturday": 5,
    "Sunday": 6,
}

# 不明な曜日名は月曜扱い（警告ログを出す）
DEFAULT_WEEKDAY_OFFSET = 0

DAYS_PER_WEEK = 7

# =============================================
# カレンダー (ICS) 出力
# =============================================
ICS_PRODID = "-//CoachRunningIA//TrainingPlan//FR"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
ICS_UID_DOMAIN = "coachrunningia.app"
ICS_EVENT_STATUS = "CONFIRMED"
ICS_SUMMARY_ICON = "🏃"
ICS_LINE_BREAK = "\r\n"
# 1行の最大オクテット数（超える場合は CRLF + 空白 で折り返す）
ICS_MAX_LINE_OCTETS = 75
ICS_MIME_TYPE = "text/calendar"
ICS_FILE_PREFIX = "Programme_-_"
ICS_FILE_EXTENSION = ".ics"

# =============================================
# TCX / Markdown 出力
# =============================================
TCX_MIME_TYPE = "application/vnd.garmin.tcx+xml"
TCX_FILE_EXTENSION = ".tcx"
TCX_CREATOR_NAME = "Coach Running IA"
TCX_DEFAULT_DURATION_SECONDS = 3600
TCX_TARGETS = ("garmin", "coros")

MD_MIME_TYPE = "text/markdown"
MD_FILE_EXTENSION = ".md"

# =============================================
# VMA
# =============================================
# タイムトライアルからのVMA推定：距離帯ごとの維持可能な%VMA
# (距離の上限m, 係数) 。10000m超は補正なし
VMA_DISTANCE_FACTORS = (
    (1500, 1.00),
    (3000, 0.95),
    (5000, 0.90),
    (10000, 0.85),
)
VMA_DEFAULT_FACTOR = 1.0

# トレーニングゾーン：(名称, 下限%, 上限%, 用途)
VMA_ZONES = (
    ("Récupération", 0.50, 0.60, "Récupération active, échauffement"),
    ("Endurance Fondamentale", 0.60, 0.70, "Footing, sortie longue"),
    ("Endurance Active", 0.70, 0.80, "Tempo run, allure marathon"),
    ("Seuil", 0.80, 0.90, "Seuil anaérobie, allure semi"),
    ("VMA", 0.95, 1.05, "Fractionné court, développement VMA"),
)

# =============================================
# タイム予測（Riegel）
# =============================================
RIEGEL_EXPONENT = 1.06

# (距離m, 表示ラベル)
REFERENCE_DISTANCES = (
    (1500, "1500m"),
    (3000, "3000m"),
    (5000, "5km"),
    (10000, "10km"),
    (21097, "Semi-marathon"),
    (42195, "Marathon"),
)

# =============================================
# マラソンペース
# =============================================
MARATHON_DISTANCE_KM = 42.195
SPLIT_INTERVAL_KM = 5
LAST_SPLIT_KM = 40

# ペース換算表（分/km）と速度によるレベル分け
PACE_TABLE_START_MIN = 4.0
PACE_TABLE_END_MIN = 8.0
PACE_TABLE_STEP_MIN = 0.5

# (速度km/hの下限, レベル) 上から順に判定
SPEED_LEVELS = (
    (15.0, "Elite"),
    (12.0, "Confirmé"),
    (10.0, "Intermédiaire"),
    (0.0, "Débutant"),
)
