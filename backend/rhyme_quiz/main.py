"""
FastAPIアプリケーションのエントリーポイント（アプリの起動入口）

【初心者向け】
このファイルは韻クイズのバックエンドAPIサーバーを起動する「玄関」です。
- FastAPI: PythonのWebフレームワーク。REST APIを簡単に作れる
- 起動時に /health, /quiz のルート（APIの窓口）を登録し、
  起動イベントで問題データを読み込んでおきます

実行方法:
    pip install -e .
    uvicorn rhyme_quiz.main:app --reload --port 8000
"""
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from rhyme_quiz.core.errors import AppError, app_error_handler, validation_error_handler
from rhyme_quiz.core.settings import settings
from rhyme_quiz.quiz.repository import QuizDataError, get_repository
from rhyme_quiz.routers import health, judge, quiz, score

# ロガー設定（LOG_LEVEL で出力レベルを変更できる）
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Rhyme Quiz API",
    description="韻クイズ（母音パターン当て）API",
    version="0.1.0",
)

# CORS設定: フロントエンドからAPIを呼ぶ際の跨域通信を許可
# 環境変数 CORS_ORIGINS で許可するオリジン（例: http://localhost:3000）を指定
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# エラーを { "error": { "code": "...", "message": "..." } } 形式に揃える
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# ルーター登録: 各APIの「窓口」をURLパスに割り当て
# /health=死活確認, /quiz/next=出題, /quiz/{id}/submit=採点, /quiz/score=集計
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(quiz.router, prefix="/quiz", tags=["quiz"])
app.include_router(judge.router, prefix="/quiz", tags=["judge"])
app.include_router(score.router, prefix="/quiz", tags=["score"])


@app.on_event("startup")
async def startup_event():
    """
    起動時の処理: 問題データを読み込んでキャッシュしておく
    """
    try:
        questions = get_repository().find_all_questions()
        logger.info(f"問題データ: {len(questions)}問")
    except QuizDataError as e:
        # 失敗してもサーバ起動は落とさない（ログだけ出す）
        logger.error(f"起動時の問題データ読み込みに失敗しました: {e}")


@app.get("/")
async def root():
    """ルートエンドポイント"""
    return {"message": "Rhyme Quiz API"}
