"""Score intake profiles from a JSON file or a CSV/XLSX batch."""
import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from partner_intake.config import settings
from partner_intake.score.reasons import compose_reasons, next_step
from partner_intake.score.scorer import score_breakdown, score_profile
from partner_intake.storage.intakes import from_record
from partner_intake.utils.io import load_profile, read_data_file, records_from_frame
from partner_intake.utils.logs import setup_job_logging

logger = logging.getLogger(__name__)


def score_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Score every intake row in a flattened intake table.

    Args:
        df: DataFrame with record-shaped columns

    Returns:
        Input rows with score, tier, reason_text and next_step columns
    """
    logger.info(f"Scoring {len(df)} intakes...")

    results = []
    for record in tqdm(records_from_frame(df), total=len(df), desc="Scoring intakes"):
        profile = from_record(record)
        score, tier = score_profile(profile)
        results.append({
            "score": score,
            "tier": tier,
            "reason_text": compose_reasons(score_breakdown(profile), profile),
            "next_step": next_step(score),
        })

    scores_df = pd.DataFrame(results, index=df.index, columns=["score", "tier", "reason_text", "next_step"])
    return pd.concat([df, scores_df], axis=1)


def score_file(file_path: Path, out_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Score a single JSON profile (logged) or a CSV/XLSX batch (written to out_dir).

    Returns:
        Path of the scored CSV for batches, None for a single profile
    """
    if file_path.suffix.lower() == ".json":
        profile = load_profile(file_path)
        score, tier = score_profile(profile)
        logger.info(f"{profile.company or file_path.name}: score={score} tier={tier}")
        for code, points in score_breakdown(profile).items():
            logger.info(f"  {code:<16} +{points}")
        logger.info(f"Next step: {next_step(score)}")
        return None

    result_df = score_frame(read_data_file(file_path))

    out_dir = Path(out_dir or settings.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M")
    output_path = out_dir / f"scored_intakes_{timestamp}.csv"
    result_df.to_csv(output_path, index=False, encoding="utf-8")
    logger.info(f"Scored intakes written to {output_path}")
    return output_path


def main():
    """Main entry point for intake scoring."""
    parser = argparse.ArgumentParser(description="Score distributor intake profiles")
    parser.add_argument("file", type=Path, help="Profile JSON, or CSV/XLSX of flattened intakes")
    parser.add_argument("--out-dir", type=Path, help="Output directory for batch results")
    args = parser.parse_args()

    setup_job_logging("score_intake")
    start_time = datetime.now()
    score_file(args.file, args.out_dir)
    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Scoring complete in {duration:.2f} seconds", extra={"duration": duration})


if __name__ == "__main__":
    main()
