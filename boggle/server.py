import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from boggle.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")


class SolveRequest(BaseModel):
    dimension: int
    board: str


def create_app(dictionary=None) -> FastAPI:
    """Build the service. A preloaded dictionary skips loading one from DICTIONARY_PATH."""
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if application.state.dictionary is None:
            from boggle.dictionary import load_dictionary
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            application.state.dictionary = load_dictionary(
                settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH, settings.SHUFFLE_DICTIONARY
            )
        yield

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)
    application.state.dictionary = dictionary

    @application.get("/health")
    async def health():
        loaded = application.state.dictionary
        return {
            "status": "ok",
            "dictionary_loaded": loaded is not None,
            "word_count": len(loaded) if loaded is not None else 0,
        }

    @application.post("/solve")
    def solve(body: SolveRequest):
        from boggle.board import Board
        from boggle.errors import InvalidArgumentError
        from boggle.metrics import StageTimer
        from boggle.solver import solve as solve_board

        if application.state.dictionary is None:
            raise HTTPException(503, "Dictionary not loaded")

        timer = StageTimer()

        with timer.stage("build_board"):
            try:
                board = Board(body.dimension, body.board, settings.REJECT_DUPLICATE_LETTERS)
            except InvalidArgumentError as e:
                logger.info("Rejected board %r: %s", body.board, e)
                raise HTTPException(400, str(e))

        logger.info("Board %dx%d: %s", board.dimension, board.dimension,
                    " / ".join(" ".join(row) for row in board.rows))

        with timer.stage("search"):
            all_words = solve_board(board, application.state.dictionary, 0, max(settings.SEARCH_WORKERS, 1))

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        return JSONResponse({
            "dimension": board.dimension,
            "board": board.rows,
            "words": words,
            "word_count": len(all_words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.setLevel(logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()


def main():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
