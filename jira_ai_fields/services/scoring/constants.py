"""
Rule-based scoring constants.

Theme labels, keyword groups and the message templates used for the
suggested next action and analysis note.
"""

# Theme labels (written to ai_theme_category)
THEME_STABILITY = "安定性"
THEME_UX = "UX改善"
THEME_PERFORMANCE = "パフォーマンス"
THEME_GROWTH = "ビジネス成長"
THEME_ANALYTICS = "分析・計測"
THEME_OTHER = "その他"

# Checked in order, first match wins. Keywords are matched as lowercase
# substrings of summary + description and of each label.
THEME_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (THEME_STABILITY, ("bug", "error", "defect", "stability", "障害", "エラー", "不具合")),
    (THEME_UX, ("ux", "ui", "design", "デザイン", "体験", "使いやす")),
    (THEME_PERFORMANCE, ("performance", "speed", "速度", "レスポンス", "パフォーマンス", "スケール")),
    (THEME_GROWTH, ("growth", "marketing", "revenue", "マーケ", "集客", "売上", "課金")),
    (THEME_ANALYTICS, ("analytics", "data", "データ", "分析", "計測")),
)

# Impact formula
IMPACT_BASE = 3
IMPACT_COMMENT_WEIGHT = 0.6
IMPACT_COMMENT_CAP = 3
IMPACT_THEME_BOOST = {THEME_STABILITY: 2, THEME_GROWTH: 1.5}
IMPACT_DEFAULT_THEME_BOOST = 1

# Effort buckets by description length (chars)
EFFORT_SHORT_DESCRIPTION = 200
EFFORT_MEDIUM_DESCRIPTION = 800
EFFORT_THEME_ADJUSTMENT = {THEME_STABILITY: -1, THEME_PERFORMANCE: 1}

# Urgency formula
URGENCY_BASE = 5
URGENCY_RECENT_DAYS = 3
URGENCY_STALE_DAYS = 30
URGENCY_COMMENT_CAP = 5
URGENCY_COMMENT_WEIGHT = 0.6
URGENCY_STABILITY_BOOST = 1.5
URGENT_THRESHOLD = 8

# Days-since-update when the issue has no update timestamp, and the floor
DEFAULT_DAYS_SINCE_UPDATE = 90.0
MIN_DAYS_SINCE_UPDATE = 0.1

# Confidence formula
CONFIDENCE_BASE = 0.6
CONFIDENCE_COMMENT_WEIGHT = 0.03
CONFIDENCE_COMMENT_CAP = 0.15
CONFIDENCE_VOTE_WEIGHT = 0.01
CONFIDENCE_VOTE_CAP = 0.1
CONFIDENCE_STALENESS_DAYS = 120
CONFIDENCE_STALENESS_CAP = 0.25
CONFIDENCE_MIN = 0.4
CONFIDENCE_MAX = 0.9

SCORE_MIN = 1
SCORE_MAX = 10

# Suggested next action messages
ACTION_NO_STATUS = "次のステップとして {theme} に関する対応案を検討してください。"
ACTION_DONE = "完了後の影響確認とフィードバック収集を継続してください。"
ACTION_URGENT = "直近のスプリントで優先対応できるよう、担当者アサインと要件の確定を行ってください。"
ACTION_IN_PROGRESS = "進行中の作業内容を棚卸しし、次のデリバリープランを更新してください。"
ACTION_UX = "ユーザビリティテストまたは顧客ヒアリングで改善案の検証を進めてください。"
ACTION_STABILITY = "原因調査と再発防止策の整理を進め、必要であればホットフィックスを検討してください。"
ACTION_BACKLOG = "バックログの優先度を見直し、{theme} に関する次のアクションを決めてください。"

DONE_STATUS_MARKERS = ("done", "完了")
IN_PROGRESS_STATUS_MARKERS = ("in progress", "進行")

# Analysis note sentences, joined with a single space
NOTE_ACTIVITY = "投票数 {votes} 件、コメント {comments} 件を参照しました。"
NOTE_STALENESS = "最終更新から {days} 日経過しています。"
NOTE_THEME = "テーマは「{theme}」と推定しました。"
NOTE_SCORES = "インパクト {impact}、緊急度 {urgency}、労力 {effort} を基に優先度を算出しています。"
NOTE_DELIMITER = " "
