# postback data produced by the poll invitation buttons
ANSWER_ACTION = "answer"

POLL_ALT_TEXT = "アンケート: OKですか？NGですか？"
POLL_TITLE = "アンケート"
POLL_PROMPT = "以下のボタンで回答してください。"
POLL_RESULTS_LABEL = "現在の結果を見る"

ANSWER_CONFIRMATION_PREFIX = "回答を受け付けました: "

RESULTS_PAGE_TITLE = "アンケート結果"
RESULTS_PAGE_NO_POST_ID = "指定されていません"
