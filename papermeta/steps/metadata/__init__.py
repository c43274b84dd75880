"""
papermeta metadata extraction module.

Recovers title, authors, abstract, DOI, publication date and journal from
the plain text of an academic paper using positional and pattern heuristics.

Module Structure:
- normalizer.py: splits and trims the text for line-based heuristics
- extractors/: one pure function per bibliographic field
- assembler.py: runs the extractors and applies the title fallback
- extraction_pipeline.py: entry point, degrades on upstream failure
- metadata_step.py: pipeline step running the engine over document batches

Usage:
    from papermeta.steps.metadata.extraction_pipeline import ExtractionPipeline

    metadata = ExtractionPipeline().extract(text)
    metadata.title, metadata.authors, metadata.doi
"""
