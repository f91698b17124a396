def format_info(move, score, nodes, elapsed):
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    score_str = "book" if score is None else f"{score:+d}"
    if score is not None and score > 0:
        score_str += f" (win in {10 - score + 1})"
    elif score is not None and score < 0:
        score_str += f" (loss in {10 + score + 1})"
    return f"info move {move} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)}ms"
