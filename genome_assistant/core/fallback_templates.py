CORE_PROMOTER_PREDICTION = {
    "name": "Core Promoter Element",
    "category": "Gene Regulation",
    "base_confidence": 88,
    "confidence_span": 10,
    "mechanism": "Contains canonical TATA box sequence that recruits TFIID and positions RNA polymerase II for transcription initiation",
    "evidence": ["TATA box motif detected", "Positioned -25 to -30 from TSS", "Compatible with Pol II transcription"],
    "diseases": ["Promoter mutations linked to various cancers", "Beta-thalassemia mutations"],
}

CPG_ISLAND_PREDICTION = {
    "name": "CpG Island Regulatory Region",
    "category": "Epigenetic Regulation",
    "base_confidence": 75,
    "confidence_span": 15,
    "mechanism": "High GC content suggests CpG island presence, often found near gene promoters and subject to DNA methylation regulation",
    "evidence": ["GC content: {gc_content}%", "CpG dinucleotide enrichment", "Potential methylation target"],
    "diseases": ["Aberrant methylation in cancer", "Imprinting disorders"],
}

SILENCER_PREDICTION = {
    "name": "Silencer Element",
    "category": "Transcriptional Repression",
    "base_confidence": 65,
    "confidence_span": 20,
    "mechanism": "Repetitive GC-rich motifs can recruit repressive transcription factors and chromatin modifiers",
    "evidence": ["GC-rich repeat pattern", "Potential REST/NRSF binding", "Chromatin condensation target"],
    "diseases": ["Neurological disorders", "Developmental abnormalities"],
}

ENHANCER_PREDICTION = {
    "name": "Enhancer Activity",
    "category": "Tissue-Specific Regulation",
    "base_confidence": 55,
    "confidence_span": 30,
    "mechanism": "Sequence features suggest potential enhancer activity, capable of increasing transcription of target genes in specific cellular contexts",
    "evidence": ["Moderate sequence complexity", "Potential TF binding sites", "Conserved across species"],
    "diseases": ["Enhancer hijacking in cancer", "Limb malformations"],
}

TF_BINDING_PREDICTION = {
    "name": "Transcription Factor Binding Site",
    "category": "Gene Regulation",
    "base_confidence": 40,
    "confidence_span": 30,
    "mechanism": "Contains potential binding motifs for sequence-specific transcription factors",
    "evidence": ["Short conserved motifs detected", "DNase hypersensitivity predicted", "Evolutionary conservation"],
    "diseases": ["Mutations affect gene expression", "Associated with complex traits"],
}

GENE_PANEL = [
    ("GATA4", "GATA Binding Protein 4", "Cardiac transcription factor"),
    ("NKX2-5", "NK2 Homeobox 5", "Heart development"),
    ("SOX2", "SRY-Box 2", "Pluripotency maintenance"),
    ("MYC", "MYC Proto-Oncogene", "Cell proliferation"),
    ("CTCF", "CCCTC-Binding Factor", "Chromatin organization"),
    ("TP53", "Tumor Protein P53", "Cell cycle regulation"),
    ("HNF4A", "Hepatocyte Nuclear Factor 4 Alpha", "Liver function"),
]

GENE_DESCRIPTION_TEMPLATE = "{full_name} - {role}"

DEFAULT_ELEMENT_NAME = "regulatory element"

HYPOTHESES = [
    {
        "statement": "The identified sequence functions as a {element} and enhances expression of nearby genes in a tissue-specific manner.",
        "experiment_type": "Reporter Assay",
        "approach": "Clone the sequence upstream of a luciferase reporter gene and transfect into relevant cell lines. Measure luminescence to quantify enhancer activity.",
        "expected_outcome": "Increased luciferase activity (>2-fold) compared to empty vector control in target tissue cell lines.",
        "resources": "Luciferase reporter plasmid, cell lines, transfection reagents, luminometer",
        "timeline": "4-6 weeks",
    },
    {
        "statement": "Specific transcription factors bind to the regulatory sequence and mediate its function.",
        "experiment_type": "ChIP-seq Analysis",
        "approach": "Perform chromatin immunoprecipitation followed by sequencing using antibodies against predicted transcription factors.",
        "expected_outcome": "Enrichment of ChIP signal at the sequence location with predicted TFs in relevant cell types.",
        "resources": "ChIP-grade antibodies, sequencing platform, computational analysis pipeline",
        "timeline": "6-8 weeks",
    },
    {
        "statement": "Deletion of this regulatory sequence affects expression of target genes.",
        "experiment_type": "CRISPR Knockout",
        "approach": "Design guide RNAs flanking the sequence region. Use CRISPR-Cas9 to delete the region in cell lines or animal models.",
        "expected_outcome": "Measurable changes in expression of predicted target genes via qPCR or RNA-seq.",
        "resources": "CRISPR reagents, cell culture, molecular biology supplies",
        "timeline": "8-12 weeks",
    },
    {
        "statement": "The sequence exhibits chromatin accessibility patterns consistent with its predicted regulatory function.",
        "experiment_type": "ATAC-seq Profiling",
        "approach": "Perform ATAC-seq in relevant cell types to assess chromatin accessibility at the sequence location.",
        "expected_outcome": "Open chromatin signal at the sequence region in cell types where function is predicted.",
        "resources": "ATAC-seq protocol, sequencing, bioinformatics analysis",
        "timeline": "3-4 weeks",
    },
]

CHAT_FALLBACK_RESPONSES = [
    "Based on your observation about liver tissue activity, I've updated the predictions. Consider ChIP-seq for HNF4α to validate.",
    "Interesting! Liver-specific enhancers often contain HNF1α, HNF4α, and C/EBP binding sites. Should I search for these motifs?",
    "Thank you for this context. I've generated a new hypothesis focused on testing enhancer activity in HepG2 cells.",
]

MISSING_KEY_REASON = "No API key configured; showing demo data."
CHAT_EMPTY_REPLY_REASON = "The model returned an empty reply."
