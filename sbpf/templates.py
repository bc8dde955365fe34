"""File templates for new SBPF projects."""

from __future__ import annotations

import json

PLACEHOLDER = "default_project_name"


def _lines(*lines: str, trailing_newline: bool = False) -> str:
    text = "\n".join(lines)
    return text + "\n" if trailing_newline else text


PROGRAM = _lines(
    ".globl entrypoint",
    "entrypoint:",
    "  lddw r1, message",
    "  mov64 r2, 14",
    "  call sol_log_",
    "  exit",
    ".rodata",
    '  message: .ascii "Hello, Solana!"',
    trailing_newline=True,
)

README = f"# {PLACEHOLDER}\n\nCreated with sbpf"

_IGNORED_PATHS = (
    "build/**/*",
    "deploy/**/*",
    "node_modules",
    ".sbpf",
    ".DS_Store",
    ".vscode",
    "keypair.json",
    "package-lock.json",
    "test-ledger",
    "yarn.lock",
    "target",
)
GITIGNORE = _lines(*_IGNORED_PATHS)

_TEST_SCRIPT = (
    "KEYPAIR=$(solana config get | grep Keypair | cut -b 15-) && "
    "cross-env SIGNER=$(cat $KEYPAIR) mocha --import=tsx tests/**/*.ts"
)

PACKAGE_JSON = (
    json.dumps(
        {
            "name": PLACEHOLDER,
            "description": "Created with sBPF",
            "version": "1.0.0",
            "main": "index.js",
            "scripts": {"test": _TEST_SCRIPT},
            "dependencies": {"@solana/web3.js": "^1.91.8"},
            "devDependencies": {
                "cross-env": "^7.0.3",
                "@types/chai": "^4.3.16",
                "@types/mocha": "^10.0.6",
                "chai": "^5.1.1",
                "mocha": "^10.4.0",
                "tsx": "^4.11.0",
            },
        },
        indent=2,
    )
    + "\n"
)

TSCONFIG = (
    "\n"
    + json.dumps(
        {
            "compilerOptions": {
                "target": "es6",
                "module": "commonjs",
                "strict": True,
                "esModuleInterop": True,
                "resolveJsonModule": True,
                "skipLibCheck": True,
                "forceConsistentCasingInFileNames": True,
            }
        },
        indent=4,
    )
    + "\n"
)

TS_TESTS = """
import { Connection, Keypair, Transaction, TransactionInstruction } from "@solana/web3.js"
import programSeed from "../deploy/default_project_name-keypair.json"

const RPC_URL = "http://127.0.0.1:8899"

const program = Keypair.fromSecretKey(Uint8Array.from(programSeed)).publicKey
const signer = Keypair.fromSecretKey(Uint8Array.from(JSON.parse(process.env.SIGNER!)))
const connection = new Connection(RPC_URL, { commitment: "confirmed" })

async function sendAndConfirm(tx: Transaction): Promise<string> {
    const latest = await connection.getLatestBlockhash()
    tx.recentBlockhash = latest.blockhash
    tx.lastValidBlockHeight = latest.lastValidBlockHeight
    const signature = await connection.sendTransaction(tx, [signer])
    await connection.confirmTransaction({ signature, ...latest })
    console.log(`Transaction successful! ${signature}`)
    return signature
}

describe("hello solana tests", () => {
    it('Logs out "Hello, Solana!"', async () => {
        const instruction = new TransactionInstruction({
            keys: [{ pubkey: signer.publicKey, isSigner: true, isWritable: true }],
            programId: program,
        })
        await sendAndConfirm(new Transaction().add(instruction))
    })
})
"""

_DEV_DEPENDENCIES = {
    "mollusk-svm": "0.7.2",
    "solana-instruction": "3.1.0",
    "solana-address": "2.0.0",
}

CARGO_TOML = _lines(
    "[package]",
    f'name = "{PLACEHOLDER}"',
    'version = "0.1.0"',
    'edition = "2021"',
    "",
    "[dependencies]",
    "",
    "[dev-dependencies]",
    *(f'{crate} = "{version}"' for crate, version in _DEV_DEPENDENCIES.items()),
    "",
    "[features]",
    "test-sbf = []",
)

RUST_TESTS = """#[cfg(test)]
mod tests {
    use mollusk_svm::{result::Check, Mollusk};
    use solana_address::Address;
    use solana_instruction::Instruction;

    const KEYPAIR_PATH: &str = "deploy/default_project_name-keypair.json";
    const PROGRAM_PATH: &str = "deploy/default_project_name";

    #[test]
    fn test_hello_world() {
        let raw = std::fs::read(KEYPAIR_PATH).unwrap();
        let id_bytes: [u8; 32] = raw[..32].try_into().expect("keypair file too short");
        let program_id = Address::new_from_array(id_bytes);

        let mollusk = Mollusk::new(&program_id, PROGRAM_PATH);
        let instruction = Instruction::new_with_bytes(program_id, &[], vec![]);

        let result =
            mollusk.process_and_validate_instruction(&instruction, &[], &[Check::success()]);
        assert!(!result.program_result.is_err());
    }
}"""


def render(template: str, project_name: str) -> str:
    """Fill the project name into ``template``."""
    return template.replace(PLACEHOLDER, project_name)