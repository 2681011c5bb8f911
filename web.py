"""Web interface for the textrules selection checks and rewrites."""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from textrules import __version__, evaluate
from textrules.host import MemoryHost, run_command
from textrules.result import Rule

app = FastAPI(
    title="Textrules",
    description="Regex-based checks and rewrites for selected editor text",
    version=__version__,
)


class EvaluateRequest(BaseModel):
    """Request model for evaluating a rule against a selection."""

    text: str
    rule: Rule
    file_name: Optional[str] = None


class EvaluateResponse(BaseModel):
    """Response model for a rule result."""

    rule: Rule
    kind: str
    text: Optional[str] = None


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the main web interface."""
    return """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Textrules</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 720px;
            margin: 40px auto;
            padding: 0 20px;
        }

        textarea {
            width: 100%;
            min-height: 120px;
            font-family: monospace;
        }

        #output {
            white-space: pre-wrap;
            font-family: monospace;
            margin-top: 16px;
        }
    </style>
</head>
<body>
    <h1>Textrules</h1>
    <form id="rule-form">
        <textarea id="input-text" placeholder="123qwe @Regex [0-9]+"></textarea>
        <select id="rule">
            <option value="regex">Regex match check</option>
            <option value="alnum">Alphanumeric check</option>
            <option value="wrap">Statement wrap</option>
        </select>
        <button type="submit">Evaluate</button>
    </form>
    <div id="output"></div>

    <script>
        const form = document.getElementById('rule-form');
        const output = document.getElementById('output');

        form.addEventListener('submit', async (e) => {
            e.preventDefault();
            const text = document.getElementById('input-text').value;
            const rule = document.getElementById('rule').value;

            try {
                const response = await fetch('/api/evaluate', {
                    method: 'POST',
                    headers: {
                        'Content-Type': 'application/json',
                    },
                    body: JSON.stringify({ text, rule }),
                });

                const data = await response.json();
                if (!response.ok) {
                    throw new Error(data.detail || 'Failed to evaluate text');
                }

                output.textContent = data.kind === 'none' ? '(no change)' : data.text;
            } catch (err) {
                output.textContent = err.message;
            }
        });
    </script>
</body>
</html>
"""


@app.get("/api/rules", response_model=List[str])
async def list_rules():
    """List the available rule names."""
    return [rule.value for rule in Rule]


@app.post("/api/evaluate", response_model=EvaluateResponse)
async def evaluate_text(request: EvaluateRequest):
    """Evaluate a rule against the provided selection."""
    try:
        if request.rule is Rule.STATEMENT_WRAP and request.file_name is not None:
            host = MemoryHost(current_line=request.text, file_name=request.file_name)
            result = run_command(host, request.rule)
        else:
            result = evaluate(request.text, request.rule)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error processing text: {str(e)}")

    if result is None:
        return EvaluateResponse(rule=request.rule, kind="none")
    return EvaluateResponse(rule=request.rule, **result.to_dict())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
