import experiments


def test_generators_are_deterministic():
    assert experiments.gen_zipf_like(256, seed=3) == experiments.gen_zipf_like(256, seed=3)
    assert len(experiments.gen_english_like(100, seed=1)) == 100


def test_unknown_generator_falls_back():
    name, data = experiments.generate_dataset("nope", 64, seed=1)
    assert name == "nope_fallback_uniform256"
    assert len(data) == 64


def test_run_one_metrics():
    row = experiments.run_one(experiments.gen_english_like(2048, seed=5))
    assert row.correctness_ok == 1
    assert row.size_symbols == 2048
    assert row.encoded_bits == round(row.avg_code_length * 2048)
    assert row.entropy_bits <= row.avg_code_length < row.entropy_bits + 1
    assert 0 < row.efficiency <= 1.0


def test_run_one_single_symbol():
    row = experiments.run_one(experiments.gen_single_symbol(500))
    assert row.correctness_ok == 1
    assert row.encoded_bits == 0
    assert row.unique_symbols == 1
    assert row.efficiency == 1.0


def test_main_writes_outputs(tmp_path):
    outdir = tmp_path / "results"
    rc = experiments.main([
        "--outdir", str(outdir),
        "--runs", "2",
        "--exp1_size_kb", "1",
        "--exp1_generators", "zipf64,single_symbol",
        "--exp2_min_kb", "1",
        "--exp2_max_kb", "2",
        "--exp2_generators", "uniform16",
        "--log-level", "WARNING",
    ])
    assert rc == 0
    assert (outdir / "metrics.csv").exists()
    summary = (outdir / "summary.csv").read_text(encoding="utf-8").splitlines()
    # header + 2 exp1 datasets + 2 exp2 sizes
    assert len(summary) == 5
    assert (outdir / "exp1_bits_per_symbol.png").exists()
    assert (outdir / "exp2_efficiency_uniform16.png").exists()
